"""
Dynamo thin loader for sheet_viewports with module cache clearing.

This loader ensures code edits are picked up between runs without restarting Revit.
Place this in your Dynamo Python Script node.

Inputs:
    IN[0]: optional dict of Config values (see sheet_viewports.config.Config.from_dict)
"""
import sys
import os
import traceback
import importlib

sys.dont_write_bytecode = True

# MUST be the repo root that contains: sheet_viewports/
REPO_DIR = r"C:\Users\Public\Documents\sheet_viewports"

expected = [
    os.path.join(REPO_DIR, "sheet_viewports", "__init__.py"),
    os.path.join(REPO_DIR, "sheet_viewports", "entry_dynamo.py"),
]
missing = [p for p in expected if not os.path.exists(p)]
if missing:
    OUT = {
        "error": "REPO_DIR does not look like the sheet_viewports repo root (missing expected paths).",
        "REPO_DIR": REPO_DIR,
        "missing": missing,
    }
else:
    if REPO_DIR in sys.path:
        sys.path.remove(REPO_DIR)
    sys.path.insert(0, REPO_DIR)

    try:
        # Purge cached package modules so edits on disk are picked up
        for name in list(sys.modules.keys()):
            if name == "sheet_viewports" or name.startswith("sheet_viewports."):
                sys.modules.pop(name, None)

        entry = importlib.import_module("sheet_viewports.entry_dynamo")
        config = importlib.import_module("sheet_viewports.config")

        cfg_values = IN[0] if len(IN) > 0 and isinstance(IN[0], dict) else {}
        cfg = config.Config.from_dict(cfg_values)

        OUT = entry.run(entry.get_current_document(), cfg)

    except Exception as e:
        OUT = {
            "error": str(e),
            "traceback": traceback.format_exc(),
            "REPO_DIR": REPO_DIR,
            "sys_path_head": sys.path[:8],
        }

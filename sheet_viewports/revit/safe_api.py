# sheet_viewports/revit/safe_api.py

from typing import Any, Callable, Dict, Optional, TypeVar

T = TypeVar("T")

POLICY_DEFAULT = "default"
POLICY_RAISE = "raise"


def safe_call(
    diag: Any,
    *,
    phase: str,
    callsite: str,
    fn: Callable[[], T],
    default: T,
    context: Optional[Dict[str, Any]] = None,
    policy: str = POLICY_DEFAULT,
) -> T:
    """
    Call a host API function and handle its exceptions observably.

    policy:
      - "default": record error, return default
      - "raise":   record error, then re-raise
    """
    if policy not in (POLICY_DEFAULT, POLICY_RAISE):
        raise ValueError("policy must be 'default' or 'raise'")

    try:
        return fn()
    except Exception as e:
        ctx = context or {}

        if diag is not None:
            try:
                diag.error(
                    phase=phase,
                    callsite=callsite,
                    message="Exception in safe_call",
                    exc=e,
                    sheet_id=ctx.get("sheet_id"),
                    view_id=ctx.get("view_id"),
                    viewport_id=ctx.get("viewport_id"),
                    extra=ctx,
                )
            except Exception:
                # Diagnostics must never crash processing
                pass

        if policy == POLICY_RAISE:
            raise

        return default

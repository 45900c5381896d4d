import os

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

_default_check = False
_current_check = _default_check


def set_check_mode(flag: bool) -> None:
    global _current_check
    _current_check = bool(flag)


def get_check_mode() -> bool:
    # If user set env externally, honor it
    env = os.environ.get("COOMAT_CHECK")
    if env:
        value = env.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    return _current_check


def resolve_check(check) -> bool:
    """Return ``check`` unless it is None, in which case the runtime default."""
    if check is None:
        return get_check_mode()
    return bool(check)

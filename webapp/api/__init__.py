from .blueprint import AuthEnforcedBlueprint

bp = AuthEnforcedBlueprint("api", __name__, description="One-time passcode API")

from . import health  # noqa: E402,F401
from . import routes_otp  # noqa: E402,F401

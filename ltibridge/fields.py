"""Field names used in LTI content records."""

LTI_ID = "id"
LTI_PLACEMENTSECRET = "placementsecret"
LTI_SETTINGS = "settings"
LTI_ID_HISTORY = "id_history"

CONTENT_ID_PREFIX = "content:"
LAUNCH_CODE_PREFIX = "launch_code:"

"""Fixed values of the bootstrap workflow."""

# Every project identifier is PROJECT_PREFIX + the operator-supplied name
PROJECT_PREFIX = "cga-"
MIN_INPUT_LENGTH = 6

# Google APIs the starter needs enabled before the first deploy
REQUIRED_SERVICES = ("cloudbuild.googleapis.com",)

SERVICE_ACCOUNT_KEYFILE = "sa-private-key.json"
DEV_ENV_FILE = ".env"
PROD_ENV_FILE = ".env.production"

JWT_SECRET_BYTES = 256
JWT_EXPIRES_IN = "10d"

OAUTH_REDIRECT_PATH = "/auth/google/redirect"
OAUTH_SCOPES = ("email", "profile")

CONSOLE_URL = "https://console.cloud.google.com"

"""Application constants."""

# Weight normalization: all analytics aggregate in pounds
KG_TO_LBS = 2.20462

# Workout list pagination
DEFAULT_WORKOUT_PAGE_SIZE = 20

# OAuth state cookie (CSRF protection for the Google redirect round trip)
OAUTH_STATE_COOKIE = "google_oauth_state"
OAUTH_STATE_MAX_AGE_SECONDS = 10 * 60

"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_COMPANY_NAME_LENGTH = 255
MAX_USERNAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255
MAX_PHONE_LENGTH = 50
MAX_TAX_ID_LENGTH = 50
MAX_WEBSITE_LENGTH = 255
MAX_LICENSE_PLATE_LENGTH = 20
MAX_VEHICLE_NAME_LENGTH = 255
MAX_SLOT_NAME_LENGTH = 100

# Slot dimensions (centimetres), stored as NUMERIC(10, 2)
DIMENSION_PRECISION = 10
DIMENSION_SCALE = 2
MAX_DIMENSION = 99_999_999.99

# Password hashing
BCRYPT_ROUNDS = 10

# Token settings
ACCESS_TOKEN_EXPIRE_HOURS = 24
ACCESS_TOKEN_TYPE = "access"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

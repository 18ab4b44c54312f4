# Content types accepted by the generation proxy
CONTENT_TITLE = "title"
CONTENT_DESCRIPTION = "description"
CONTENT_STORY = "story"
CONTENT_SOCIAL = "social"

ALL_CONTENT_TYPES = (CONTENT_TITLE, CONTENT_DESCRIPTION, CONTENT_STORY, CONTENT_SOCIAL)

# Marketing-only kinds (same parsing pipeline, different prompts)
CONTENT_LISTING = "listing"            # /marketing/description
CONTENT_MARKETING_PACKAGE = "package"  # /marketing/package/{id}

# Mongo collections
COL_GENERATED_CONTENT = "ai_generated_content"
COL_TRANSLATIONS = "translations"
COL_USERS = "users"
COL_ARTISANS = "artisans"
COL_PRODUCTS = "products"
COL_ORDERS = "orders"
COL_ANALYTICS = "analytics"
COL_SOCIAL_SHARES = "social_shares"

# Default user role on account creation
ROLE_BUYER = "buyer"

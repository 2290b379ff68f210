# minimal_apis/catalog/config.py

"""
Settings for the catalog service, read from the environment at start-up.
"""
import os

# JWT signing and validation
JWT_KEY = os.getenv("JWT_KEY", "docs@catalogo-minimal-api-dev-signing-key")
JWT_KEY_FROM_ENV = "JWT_KEY" in os.environ
JWT_ISSUER = os.getenv("JWT_ISSUER", "ApiCatalogo")
JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "ApiCatalogo")
JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "10"))

# The single accepted login
AUTH_USERNAME = os.getenv("AUTH_USERNAME", "macoratti")
AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "numsey#123")

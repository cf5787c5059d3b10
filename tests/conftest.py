"""Test environment: must run before any acadtrack module reads settings."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!"
os.environ["JWT_EXPIRE_MINUTES"] = "10080"
os.environ["ADMIN_SECRET_CODE"] = "TEST-ADMIN-CODE"
# Lowest bcrypt cost keeps the suite fast
os.environ["BCRYPT_ROUNDS"] = "4"

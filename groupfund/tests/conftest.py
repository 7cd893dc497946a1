"""Configure pytest for groupfund.

The database engine and configuration are built at import time, so the
environment has to be in place before any ``groupfund`` module is imported.
"""

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="groupfund-tests-"))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'test.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "app.log"))
os.environ.setdefault("JWT_SECRET", "test-signing-secret-with-enough-entropy")
# Minimum bcrypt cost keeps the suite fast.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

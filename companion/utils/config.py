# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import os

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# ---------------------------
# ✅ Server
# ---------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CHAT_RATE_LIMIT = os.getenv("CHAT_RATE_LIMIT", "30/minute")

# ---------------------------
# ✅ Client
# ---------------------------

API_BASE_URL = os.getenv("COMPANION_API_URL", "http://localhost:5000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# ---------------------------
# ✅ Firebase Realtime Database
# ---------------------------

FIREBASE_ADMIN_JSON = os.getenv("FIREBASE_ADMIN_JSON")
FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")

MOODS_COLLECTION = "moods"
JOURNALS_COLLECTION = "journals"

# ---------------------------
# ✅ Ambient
# ---------------------------

SOUND_VOLUME = 0.5
BREATHING_CYCLE_SECONDS = 19.0  # 4 + 7 + 8
BREATHING_TICK_SECONDS = 0.1
DEFAULT_MOOD = 5

# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import json
import logging
import firebase_admin
from firebase_admin import credentials

from companion.utils import config

logger = logging.getLogger(__name__)


def init_firebase():
    """
    Initializes the Firebase Admin SDK once per process and returns the app.
    FIREBASE_ADMIN_JSON may be a stringified service-account JSON or a path to one.
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    raw_json = config.FIREBASE_ADMIN_JSON
    if not raw_json:
        raise ValueError("FIREBASE_ADMIN_JSON is not set in environment variables")
    if not config.FIREBASE_DATABASE_URL:
        raise ValueError("FIREBASE_DATABASE_URL is not set in environment variables")

    try:
        if raw_json.strip().startswith("{"):
            # 🧠 Stringified JSON (e.g., hosted deploys)
            cred = credentials.Certificate(json.loads(raw_json))
        else:
            # 🧪 Local path to JSON (for dev)
            cred = credentials.Certificate(raw_json)

        app = firebase_admin.initialize_app(cred, {"databaseURL": config.FIREBASE_DATABASE_URL})
    except Exception as e:
        raise RuntimeError("❌ Failed to initialize Firebase Admin SDK") from e

    logger.info("🔥 Firebase Realtime Database ready")
    return app

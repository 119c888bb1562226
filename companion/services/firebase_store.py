# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Any, Optional
from firebase_admin import db

from companion.utils.firebase import init_firebase


class FirebaseStore:
    """
    Realtime Database as a flat path -> record store.
    """

    def __init__(self, app=None):
        self._app = app or init_firebase()

    def _ref(self, path: str):
        return db.reference(path, app=self._app)

    def write(self, path: str, record: Any):
        self._ref(path).set(record)

    def read_all(self, path: str) -> Optional[Any]:
        return self._ref(path).get()

    def delete(self, path: str):
        self._ref(path).delete()

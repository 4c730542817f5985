"""
File-backed access to the campaigns and users JSON documents.

Every ``load`` re-reads the file, so edits on disk show up on the next request.
The optional cache keeps parsed documents until ``invalidate`` is called.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request

from .config import AppConfig

logger = logging.getLogger(__name__)

CAMPAIGNS = "campaigns"
USERS = "users"
ENCRYPTED_USERS = "encrypted_users"


class DataUnavailable(Exception):
    """The backing file for a dataset is missing, unreadable or not valid JSON."""

    def __init__(self, dataset: str, path: Path, reason: str):
        super().__init__(f"{dataset} ({path}): {reason}")
        self.dataset = dataset
        self.path = path


class DataStore:
    def __init__(self, config: AppConfig):
        self.paths: Dict[str, Path] = {
            CAMPAIGNS: Path(config.campaigns_path),
            USERS: Path(config.users_path),
            ENCRYPTED_USERS: Path(config.encrypted_users_path),
        }
        self.cache_enabled = config.cache_enabled
        self._cache: Dict[str, Any] = {}

    def path_for(self, dataset: str) -> Path:
        return self.paths[dataset]

    def load(self, dataset: str) -> Any:
        path = self.path_for(dataset)
        if self.cache_enabled and dataset in self._cache:
            return self._cache[dataset]
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise DataUnavailable(dataset, path, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DataUnavailable(dataset, path, f"unreadable: {e}") from e
        except json.JSONDecodeError as e:
            raise DataUnavailable(dataset, path, f"invalid JSON: {e}") from e
        if self.cache_enabled:
            self._cache[dataset] = document
        return document

    def invalidate(self, dataset: Optional[str] = None) -> None:
        if dataset is None:
            self._cache.clear()
        else:
            self._cache.pop(dataset, None)
        logger.debug("Invalidated cached dataset(s): %s", dataset or "all")


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store

"""Preference and credential storage for translators."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import config
from .errors import PreferencesError


class PreferenceStore:
    """
    Stores translator preferences and credentials in a JSON file.

    Temporary credentials are kept in memory only and are never written.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or config.preferences_path).expanduser()
        self.preferences: Dict[str, Any] = {}
        self.credentials: Dict[str, str] = {}
        self.temporary_credentials: Dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return
        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            return
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise PreferencesError(f"{self.path} ({e})") from e
        if not isinstance(data, dict):
            raise PreferencesError(f"{self.path} (expected a JSON object)")
        preferences = data.get("preferences", {})
        credentials = data.get("credentials", {})
        if not isinstance(preferences, dict):
            raise PreferencesError(f"{self.path} ('preferences' must be a JSON object)")
        if not isinstance(credentials, dict):
            raise PreferencesError(f"{self.path} ('credentials' must be a JSON object)")
        for credential_id, value in credentials.items():
            if not isinstance(value, str):
                raise PreferencesError(f"{self.path} (credential '{credential_id}' must be a string)")
        self.preferences = dict(preferences)
        self.credentials = dict(credentials)

    def save(self) -> None:
        """Write persistent preferences and credentials to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "preferences": self.preferences,
            "credentials": self.credentials,
        }
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_preference(self, key: str, default: Any = None) -> Any:
        return self.preferences.get(key, default)

    def set_preference(self, key: str, value: Any) -> None:
        self.preferences[key] = value
        self.save()

    def get_credential(self, credential_id: str) -> Optional[str]:
        """Get a credential, preferring the temporary value if one is set."""
        if credential_id in self.temporary_credentials:
            return self.temporary_credentials[credential_id]
        return self.credentials.get(credential_id)

    def set_credential(self, credential_id: str, value: str, temporary: bool = False) -> None:
        """
        Store a credential.

        Args:
            credential_id: Credential identifier
            value: Credential value
            temporary: Keep the value for this session only
        """
        if temporary:
            self.temporary_credentials[credential_id] = value
            if self.credentials.pop(credential_id, None) is not None:
                self.save()
        else:
            self.temporary_credentials.pop(credential_id, None)
            self.credentials[credential_id] = value
            self.save()

    def is_credential_stored_temporarily(self, credential_id: str) -> bool:
        return credential_id in self.temporary_credentials

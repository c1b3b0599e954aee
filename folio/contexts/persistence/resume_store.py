"""
Resume Store

Persists the two logical records of the resume builder on top of any
KeyValueStore:
- the resume document (JSON wire form under RESUME_STORAGE_KEY)
- the chosen template identifier (under RESUME_TEMPLATE_KEY)

Loading and saving both go through the normalizer. A missing key, bytes that
are not UTF-8, or text that does not parse (including oversized numbers and
nesting too deep to decode) all load as the empty document; the failure is
logged and never raised.
"""

import json
from typing import Any

from folio.contexts.normalization.defaults import (
    RESUME_STORAGE_KEY,
    RESUME_TEMPLATE_KEY,
    RESUME_TEMPLATES,
    normalize_template,
)
from folio.contexts.normalization.normalizer import normalize_resume
from folio.contexts.normalization.resume_data_structure import ResumeDocument
from folio.contexts.persistence.exceptions import UnknownTemplateError
from folio.contexts.persistence.logger import _log_debug, _log_warning
from folio.contexts.persistence.storage import KeyValueStore


def serialize_resume(document: ResumeDocument) -> bytes:
    """Encode a document as UTF-8 JSON in its wire form."""
    return json.dumps(document.to_dict(), ensure_ascii=False).encode("utf-8")


def deserialize_resume(raw: bytes) -> Any:
    """
    Decode stored bytes into untyped data for the normalizer.

    Returns:
        Parsed JSON value, or {} if raw is None or cannot be decoded
    """
    if raw is None:
        return {}
    try:
        return json.loads(raw.decode("utf-8"))
    except (ValueError, RecursionError) as e:
        _log_warning(f"Stored resume is unreadable, starting from an empty document ({e})")
        return {}


class ResumeStore:
    """
    Resume and template records over an injected KeyValueStore.

    Example:
        store = ResumeStore(InMemoryStore())
        doc = store.load_resume()          # empty document on first use
        store.save_resume(update_summary(doc, "Engineer ..."))
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load_resume(self) -> ResumeDocument:
        raw = self.store.get(RESUME_STORAGE_KEY)
        if raw is None:
            _log_debug("No stored resume, starting from an empty document")
        return normalize_resume(deserialize_resume(raw))

    def save_resume(self, document: ResumeDocument) -> None:
        """Re-validate an edited document and store its wire form."""
        self.store.set(RESUME_STORAGE_KEY, serialize_resume(normalize_resume(document)))
        _log_debug(f"Saved resume ({RESUME_STORAGE_KEY})")

    def clear_resume(self) -> ResumeDocument:
        """
        Reset the stored resume to blank fields.

        The record is overwritten with the empty document rather than removed.

        Returns:
            The empty document now stored
        """
        document = normalize_resume({})
        self.save_resume(document)
        return document

    def load_template(self) -> str:
        return normalize_template(self.store.get(RESUME_TEMPLATE_KEY))

    def save_template(self, template: str) -> None:
        """
        Store the chosen template identifier.

        Raises:
            UnknownTemplateError: If template is not one of RESUME_TEMPLATES
        """
        if template not in RESUME_TEMPLATES:
            raise UnknownTemplateError(template, RESUME_TEMPLATES)
        self.store.set(RESUME_TEMPLATE_KEY, template.encode("utf-8"))

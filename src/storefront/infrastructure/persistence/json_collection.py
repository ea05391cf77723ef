"""One JSON file holding one document collection (a list of dicts)."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

Document = dict[str, Any]


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> list[Document]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, docs: list[Document]) -> None:
        self._file_path.write_text(
            json.dumps(docs, indent=2) + "\n", encoding="utf-8"
        )

    def find(self, doc_id: str) -> Document | None:
        for doc in self.load():
            if doc.get("id") == doc_id:
                return doc
        return None

    def insert(self, doc: Document) -> str:
        """Append a document under a fresh ID and return the ID."""
        docs = self.load()
        doc_id = uuid.uuid4().hex[:20]
        docs.append({**doc, "id": doc_id})
        self.persist(docs)
        return doc_id

    def upsert(self, doc: Document) -> None:
        docs = self.load()
        for i, raw in enumerate(docs):
            if raw.get("id") == doc["id"]:
                docs[i] = doc
                break
        else:
            docs.append(doc)
        self.persist(docs)

    def replace(self, doc_id: str, doc: Document) -> bool:
        docs = self.load()
        for i, raw in enumerate(docs):
            if raw.get("id") == doc_id:
                docs[i] = {**raw, **doc, "id": doc_id}
                self.persist(docs)
                return True
        return False

    def delete(self, doc_id: str) -> bool:
        docs = self.load()
        kept = [d for d in docs if d.get("id") != doc_id]
        if len(kept) == len(docs):
            return False
        self.persist(kept)
        return True

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

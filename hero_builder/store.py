"""
Stockage des documents Hero — collaborateur externe, clé (page_id, block_id).

Le document est un blob opaque pour le store ; le moteur ne dépend que du
protocole ContentStore. SqlContentStore : SQLAlchemy (SQLite par défaut).
"""
import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, Tuple

import sqlalchemy as sa
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from .blocks.hero import HeroBlock
from .manifest.parser import dump_document, parse_document

log = logging.getLogger(__name__)


class ContentStore(Protocol):
    def get(self, page_id: str, block_id: str) -> Optional[Dict[str, Any]]: ...
    def put(self, page_id: str, block_id: str, document: Dict[str, Any]) -> None: ...


class MemoryContentStore:
    """Store en mémoire (tests, aperçu)."""

    def __init__(self):
        self._docs: Dict[Tuple[str, str], str] = {}

    def get(self, page_id: str, block_id: str) -> Optional[Dict[str, Any]]:
        raw = self._docs.get((page_id, block_id))
        return json.loads(raw) if raw is not None else None

    def put(self, page_id: str, block_id: str, document: Dict[str, Any]) -> None:
        self._docs[(page_id, block_id)] = json.dumps(document)


# ── ORM ──────────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class HeroDocumentDB(Base):
    __tablename__ = "hero_documents"
    page_id:    Mapped[str]      = mapped_column(sa.String, primary_key=True)
    block_id:   Mapped[str]      = mapped_column(sa.String, primary_key=True)
    document:   Mapped[str]      = mapped_column(sa.Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SqlContentStore:
    """Documents en JSON texte dans la table hero_documents."""

    def __init__(self, url: str = "sqlite:///:memory:"):
        kwargs = {}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            # une seule connexion, sinon chaque thread voit une base vide
            kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **kwargs)
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    @classmethod
    def from_path(cls, db_path: str) -> "SqlContentStore":
        return cls(f"sqlite:///{db_path}")

    def get(self, page_id: str, block_id: str) -> Optional[Dict[str, Any]]:
        with self.Session() as db:
            row = db.get(HeroDocumentDB, (page_id, block_id))
            return json.loads(row.document) if row else None

    def put(self, page_id: str, block_id: str, document: Dict[str, Any]) -> None:
        with self.Session() as db:
            row = db.get(HeroDocumentDB, (page_id, block_id))
            if row is None:
                db.add(HeroDocumentDB(page_id=page_id, block_id=block_id, document=json.dumps(document)))
            else:
                row.document = json.dumps(document)
            db.commit()


# ── Helpers moteur ↔ store ───────────────────────────────────────────────────

def load_document(store: ContentStore, page_id: str, block_id: str) -> Optional[HeroBlock]:
    """Charge + valide ; les documents de l'ancien éditeur sont migrés au passage."""
    data = store.get(page_id, block_id)
    if data is None:
        return None
    return parse_document(data, legacy=True)


def save_document(store: ContentStore, page_id: str, block_id: str, block: HeroBlock) -> None:
    try:
        store.put(page_id, block_id, dump_document(block))
    except Exception as e:
        log.error("Hero %s/%s : échec d'écriture (%s)", page_id, block_id, e)
        raise
    log.info("Hero %s/%s enregistré", page_id, block_id)

"""Memory service for the creator's named documents"""

import logging
from typing import Any, Dict, Optional

from ..models.enums import MemoryFile
from ..models.memory import default_document, utc_now_iso
from ..utils.merge import deep_merge
from .document_store import DocumentStore

logger = logging.getLogger(__name__)


class MemoryService:
    """Reads and writes the meta, profile, brand, content and insights documents"""

    def __init__(self, store: DocumentStore):
        """Initialize memory service with its document store"""
        self.store = store

    async def read(self, name: MemoryFile) -> Dict[str, Any]:
        """Read a memory document, falling back to its defaults.

        Missing or unreadable documents never raise; the failure is logged
        and a fresh default document is returned instead.
        """
        name = MemoryFile(name)
        try:
            data = await self.store.get(name.value)
        except Exception as e:
            logger.warning(
                "Error reading memory file %s, using defaults: %s", name.value, e
            )
            return default_document(name)

        if data is None:
            logger.warning("Memory file %s not found, using defaults", name.value)
            return default_document(name)
        return data

    async def write(
        self, name: MemoryFile, patch: Dict[str, Any], merge: bool = True
    ) -> Dict[str, Any]:
        """Write a memory document and refresh meta.lastUpdated.

        Args:
            name: Document to write.
            patch: Partial document. Deep-merged into the current document
                when merge is true, otherwise it replaces the document.
            merge: Merge or replace.

        Returns:
            The document as stored.
        """
        name = MemoryFile(name)
        if merge:
            existing = await self.read(name)
            data = deep_merge(existing, patch)
        else:
            data = patch

        await self.store.set(name.value, data)

        if name != MemoryFile.META:
            meta = await self.read(MemoryFile.META)
            meta["lastUpdated"] = utc_now_iso()
            await self.store.set(MemoryFile.META.value, meta)

        return data

    async def exists(self, name: MemoryFile) -> bool:
        return await self.store.exists(MemoryFile(name).value)

    async def is_initialized(self) -> bool:
        """Check that every memory document exists"""
        try:
            for name in MemoryFile:
                if not await self.store.exists(name.value):
                    return False
            return True
        except Exception as e:
            logger.warning("Could not check memory initialization: %s", e)
            return False

    async def initialize(self) -> None:
        """Create missing memory documents with defaults, keeping existing ones"""
        for name in MemoryFile:
            if not await self.store.exists(name.value):
                await self.store.set(name.value, default_document(name))
                logger.info("Created %s with defaults", name.value)

    async def reset(self) -> None:
        """Replace every memory document with clean defaults"""
        for name in MemoryFile:
            await self.write(name, default_document(name), merge=False)
        logger.info("Memory system reset to defaults")

    async def complete_onboarding(self) -> Dict[str, Any]:
        return await self.write(
            MemoryFile.META,
            {"onboardingComplete": True, "lastUpdated": utc_now_iso()},
        )

    async def is_onboarding_complete(self) -> bool:
        meta = await self.read(MemoryFile.META)
        return bool(meta.get("onboardingComplete", False))

    async def get_target_audience(self) -> Optional[str]:
        """AI-generated audience summary from the profile, else from meta"""
        profile = await self.read(MemoryFile.PROFILE)
        summary = (profile.get("audience") or {}).get("aiGeneratedSummary")
        if summary:
            return summary

        meta = await self.read(MemoryFile.META)
        return meta.get("targetAudience") or None

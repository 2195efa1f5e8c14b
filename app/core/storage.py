"""Process-wide stores and the FastAPI dependencies that hand them to routes."""

from functools import lru_cache

from app.core.config import settings
from app.services.credentials import CredentialStore
from app.services.item_store import InMemoryItemStore, ItemStore, sample_items


@lru_cache
def get_item_store() -> ItemStore:
    """Dependency returning the single item store owned by this process."""
    seed = sample_items() if settings.SEED_SAMPLE_ITEMS else []
    return InMemoryItemStore(seed)


@lru_cache
def get_credential_store() -> CredentialStore:
    """Dependency returning the seeded credential store (hashed on first use)."""
    return CredentialStore.from_seed(rounds=settings.BCRYPT_ROUNDS)

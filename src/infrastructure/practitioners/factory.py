from src.application.ports import PractitionerStorePort
from src.infrastructure.config import Settings
from src.infrastructure.practitioners.json_store import JsonPractitionerStore
from src.infrastructure.practitioners.memory_store import (
    InMemoryPractitionerStore,
    SAMPLE_PRACTITIONERS,
)


def build_practitioner_store(settings: Settings | None = None) -> PractitionerStorePort:
    settings = settings or Settings()
    path = settings.practitioners_path
    if path:
        return JsonPractitionerStore(storage_path=path)
    return InMemoryPractitionerStore(SAMPLE_PRACTITIONERS)

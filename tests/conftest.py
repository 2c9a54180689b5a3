import pytest

from src.services.link_collection import LinkCollectionController
from src.services.link_detail import LinkDetailController
from tests.fakes import (
    FakeLinkGateway,
    ManualScheduler,
    RecordingClipboard,
    RecordingNotifier,
)


@pytest.fixture
def gateway() -> FakeLinkGateway:
    return FakeLinkGateway()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()


@pytest.fixture
def collection(
    gateway: FakeLinkGateway,
    scheduler: ManualScheduler,
    notifier: RecordingNotifier,
    clipboard: RecordingClipboard,
) -> LinkCollectionController:
    """
    Collection controller wired to in-memory doubles.
    """
    return LinkCollectionController(
        gateway=gateway,
        scheduler=scheduler,
        notifier=notifier,
        clipboard=clipboard,
    )


@pytest.fixture
def detail(
    gateway: FakeLinkGateway,
    notifier: RecordingNotifier,
    clipboard: RecordingClipboard,
) -> LinkDetailController:
    return LinkDetailController(gateway=gateway, clipboard=clipboard, notifier=notifier)

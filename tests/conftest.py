import pytest

from hireme.core.context import Caller
from hireme.services.booking_service import BookingService
from hireme.services.listing_service import ListingService
from hireme.services.message_service import MessageService
from hireme.services.profile_service import ProfileService
from tests.fakes import FakeStorage, InMemoryDB


@pytest.fixture
def db():
    return InMemoryDB()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def profiles(db, storage):
    return ProfileService(db, storage)


@pytest.fixture
def listings(db, storage, profiles):
    return ListingService(db, storage, profiles)


@pytest.fixture
def bookings(db, profiles):
    return BookingService(db, profiles)


@pytest.fixture
def messages(db, profiles):
    return MessageService(db, profiles)


@pytest.fixture
def provider():
    return Caller(user_id="user-provider")


@pytest.fixture
def customer():
    return Caller(user_id="user-customer")


@pytest.fixture
def stranger():
    return Caller(user_id="user-stranger")


@pytest.fixture
def anonymous():
    return Caller()

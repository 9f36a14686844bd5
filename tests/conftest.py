import copy
import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fun4kidz.app.config import TestConfig
from fun4kidz.app.factory import create_app
from fun4kidz.registration.form import RegistrationForm


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


VALID_REGISTRATION = {
    "parent": {"first_name": "Dana", "last_name": "Lee", "email": "dana@example.com"},
    "children": [{"full_name": "Sam Lee"}],
    "program": {"selected_programs": ["learn-play"], "membership_only": False},
    "payment": {
        "cardholder": {"first_name": "Dana", "last_name": "Lee"},
        "billing": {"address": "1 Main St", "city": "Springfield", "state": "IL", "zip_code": "62701"},
        "card": {"type": "visa", "number": "4111 1111 1111 1111", "expiry": "12/29", "cvv": "123"},
        "amount": "",
    },
}


@pytest.fixture()
def valid_payload():
    return copy.deepcopy(VALID_REGISTRATION)


@pytest.fixture()
def valid_form(valid_payload):
    return RegistrationForm.from_dict(valid_payload)


# form fields as the registration page posts them
VALID_POST = {
    "parent.first_name": "Dana",
    "parent.last_name": "Lee",
    "parent.email": "dana@example.com",
    "children.full_name": "Sam Lee",
    "program.selected_programs": "learn-play",
    "prev_membership_only": "0",
    "payment.cardholder.first_name": "Dana",
    "payment.cardholder.last_name": "Lee",
    "payment.billing.address": "1 Main St",
    "payment.billing.city": "Springfield",
    "payment.billing.state": "IL",
    "payment.billing.zip_code": "62701",
    "payment.card.type": "visa",
    "payment.card.number": "4111111111111111",
    "payment.card.expiry": "1229",
    "payment.card.cvv": "123",
}


@pytest.fixture()
def valid_post():
    return dict(VALID_POST)

from decimal import Decimal, ROUND_HALF_UP
import pytest

from checkout_backend.payments import to_minor_units, build_order_payload, OrderCreationRequest


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1999.5, 199950),
        (1, 100),
        (0.01, 1),
        (19.99, 1999),
        (1.005, 101),
        ("250", 25000),
        (Decimal("12345.678"), 1234568),
    ],
)
def test_to_minor_units(amount, expected):
    assert to_minor_units(amount) == expected


@pytest.mark.parametrize("amount, expected", [("10.005", 1001), ("0.125", 13), ("0.005", 1), ("2.345", 235)])
def test_to_minor_units_half_cent_rounds_away_from_zero(amount, expected):
    assert to_minor_units(Decimal(amount)) == expected


def test_to_minor_units_matches_round_of_amount_times_100():
    for raw in ["0.5", "3.14", "99.999", "100000", "7.07", "1234.565"]:
        amount = Decimal(raw)
        expected = int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        assert to_minor_units(amount) == expected


def test_build_order_payload():
    req = OrderCreationRequest(amount=Decimal("1999.5"), currency="INR", receipt="r1")
    assert build_order_payload(req) == {
        "amount": 199950,
        "currency": "INR",
        "receipt": "r1",
        "payment_capture": 1,
    }

"""Tests for id and invoice code allocation."""

import pytest

from nova_pos.ledger import InvoiceCodeAllocator, OrderIdSequence
from nova_pos.ledger.identifiers import _ReservedSequence


class TestOrderIdSequence:
    def test_counts_up_from_start(self):
        ids = OrderIdSequence()

        assert [ids.allocate() for _ in range(3)] == ["1", "2", "3"]

    def test_skips_reserved_ids(self):
        ids = OrderIdSequence(reserved=["1", "2", "3", "5"])

        assert ids.allocate() == "4"
        assert ids.allocate() == "6"


class TestInvoiceCodeAllocator:
    def test_format(self):
        codes = InvoiceCodeAllocator()

        assert codes.allocate() == "NV-1001"
        assert codes.allocate() == "NV-1002"

    def test_custom_prefix_and_width(self):
        codes = InvoiceCodeAllocator(prefix="INV-", start=7, width=3)

        assert codes.allocate() == "INV-007"

    def test_skips_reserved_codes(self):
        codes = InvoiceCodeAllocator(reserved=["NV-1001"])
        codes.reserve("NV-1002")

        assert codes.allocate() == "NV-1003"
        assert codes.is_issued("NV-1001")

    def test_never_repeats(self):
        codes = InvoiceCodeAllocator(start=9998)

        issued = [codes.allocate() for _ in range(500)]

        assert len(set(issued)) == len(issued)
        assert issued[:3] == ["NV-9998", "NV-9999", "NV-10000"]


def test_base_sequence_needs_a_format():
    with pytest.raises(TypeError):
        _ReservedSequence(1)

import pytest

from log_method.subject import ExternalIdentifier, PlainObject, RecordIdentifier, resolve_subject


class Order:
    def __init__(self, id, reference=None):
        self.id = id
        if reference is not None:
            self.reference = reference


class Customer:
    def external_id(self):
        return "cus_123"


class Opaque:
    def __repr__(self):
        return "<Opaque thing>"


class Exploding:
    @property
    def id(self):
        raise RuntimeError("db gone")


def test_no_subject_resolves_to_none():
    assert resolve_subject(None) is None
    assert resolve_subject(None, external_identifier_method="reference") is None


def test_record_like_subject():
    desc = resolve_subject(Order(12))
    assert desc == RecordIdentifier(type_name="Order", id=12)
    assert desc.display == "Order/12"
    assert (desc.object_id, desc.object_class) == (12, "Order")


def test_external_identifier_beats_record_id():
    desc = resolve_subject(Order(12, reference="ORD-9"), external_identifier_method="reference")
    assert isinstance(desc, ExternalIdentifier)
    assert desc.display == "Order/ORD-9"
    assert desc.object_id == "ORD-9"


def test_missing_external_identifier_falls_back_to_id():
    desc = resolve_subject(Order(12), external_identifier_method="reference")
    assert isinstance(desc, RecordIdentifier)


def test_external_identifier_method_is_called():
    desc = resolve_subject(Customer(), external_identifier_method="external_id")
    assert desc == ExternalIdentifier(type_name="Customer", value="cus_123")


def test_plain_object_uses_repr_and_has_no_identifier():
    desc = resolve_subject(Opaque())
    assert desc == PlainObject(type_name="Opaque", representation="<Opaque thing>")
    assert desc.display == "Opaque/<Opaque thing>"
    assert desc.object_id is None
    assert desc.object_class is None


def test_builtin_values_are_plain_objects():
    assert resolve_subject("abc").display == "str/'abc'"
    assert resolve_subject(5).display == "int/5"


def test_pre_resolved_descriptor_passes_through():
    given = RecordIdentifier(type_name="Invoice", id="inv_1")
    assert resolve_subject(given, external_identifier_method="id") is given


def test_attribute_errors_propagate():
    with pytest.raises(RuntimeError, match="db gone"):
        resolve_subject(Exploding())


class LazyProxy:
    """Forwards attribute reads to a wrapped object, like a lazy user proxy."""

    def __init__(self, wrapped):
        self._wrapped = wrapped

    def __getattr__(self, name):
        return getattr(self._wrapped, name)


class Account:
    id = "acct-cls"

    def external_id(self):
        return "never called"


def test_proxy_forwarding_id_is_record_like():
    desc = resolve_subject(LazyProxy(Order(42)))
    assert desc == RecordIdentifier(type_name="LazyProxy", id=42)


def test_proxy_forwarding_external_identifier():
    desc = resolve_subject(LazyProxy(Customer()), external_identifier_method="external_id")
    assert desc == ExternalIdentifier(type_name="LazyProxy", value="cus_123")


def test_class_subject_does_not_call_unbound_methods():
    desc = resolve_subject(Customer, external_identifier_method="external_id")
    assert isinstance(desc, ExternalIdentifier)
    assert desc.type_name == "type"
    assert desc.value is Customer.external_id


def test_class_subject_with_class_level_id():
    desc = resolve_subject(Account)
    assert desc == RecordIdentifier(type_name="type", id="acct-cls")

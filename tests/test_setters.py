from unittest import TestCase

from objmapper import BaseObject, PropertyType


class Account(BaseObject):
    _balance = PropertyType.float()
    _limit = PropertyType.float(use_setter_on_init=False)
    _owner = PropertyType.string(set_with=str.title)
    _code = PropertyType.string(default="x", set_with=str.upper)

    @property
    def balance(self):
        return self._balance

    @balance.setter
    def balance(self, value):
        self._balance = abs(value)

    @property
    def limit(self):
        return self._limit

    @limit.setter
    def limit(self, value):
        self._limit = value * 100

    @property
    def owner(self):
        return self._owner

    @owner.setter
    def owner(self, value):
        self._owner = f"setter {value}"


class ReadOnly(BaseObject):
    _size = PropertyType.integer()

    @property
    def size(self):
        return self._size


class TestSetterRouting(TestCase):
    def test_setter_used(self):
        account = Account({"balance": "-3.5"})
        self.assertEqual(account._balance, 3.5)
        self.assertEqual(account.balance, 3.5)

    def test_setter_disabled(self):
        self.assertEqual(Account({"limit": 2})._limit, 2.0)

    def test_read_only_property(self):
        self.assertEqual(ReadOnly({"size": "4"}).size, 4)

    def test_detected_once(self):
        fields = {f.field_name: f for f in Account.__fields__}
        self.assertEqual(fields["_balance"].setter_name, "balance")
        self.assertIsNone(fields["_limit"].setter_name)
        self.assertIsNone(fields["_owner"].setter_name)

    def test_serialized_by_field(self):
        self.assertEqual(
            Account({"balance": -1, "limit": 1, "owner": "bob"}).to_json(),
            {"balance": 1.0, "limit": 1.0, "owner": "Bob", "code": "X"},
        )


class TestSetHook(TestCase):
    def test_hook_replaces_setter(self):
        self.assertEqual(Account({"owner": "john smith"})._owner, "John Smith")

    def test_hook_applied_to_default(self):
        self.assertEqual(Account({})._code, "X")

    def test_hook_skips_none(self):
        self.assertIsNone(Account({})._owner)

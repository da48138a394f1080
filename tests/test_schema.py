from unittest import TestCase

from objmapper import BaseObject, NestedErrors, PropertyType, Schema
from objmapper.schema import DEFAULT_SCHEMA, merge_schema


class Member(BaseObject):
    __schema__ = Schema(internal_prefix="m_")

    m_title = PropertyType.string()
    _raw = PropertyType.string()


class Parent(BaseObject):
    _id = PropertyType.integer()
    _name = PropertyType.string()


class Child(Parent):
    _id = PropertyType.string()
    _age = PropertyType.integer()


class PrefixedChild(Member):
    m_rank = PropertyType.integer()


class TestMergeSchema(TestCase):
    def test_fallback(self):
        schema = merge_schema(Schema(nested_errors=NestedErrors.RAISE), None, DEFAULT_SCHEMA)
        self.assertIs(schema.nested_errors, NestedErrors.RAISE)
        self.assertEqual(schema.internal_prefix, "_")

    def test_empty_prefix(self):
        schema = merge_schema(Schema(internal_prefix=""), DEFAULT_SCHEMA)
        self.assertEqual(schema.internal_prefix, "")

    def test_unknown_option(self):
        schema = merge_schema(DEFAULT_SCHEMA)
        with self.assertRaises(AttributeError):
            schema.unknown_option

    def test_read_only(self):
        schema = merge_schema(DEFAULT_SCHEMA)
        with self.assertRaises(AttributeError):
            schema.internal_prefix = "x"
        self.assertEqual(DEFAULT_SCHEMA.internal_prefix, "_")

    def test_class_field_settings(self):
        class StrictSchema(Schema):
            nested_errors = NestedErrors.RAISE

        schema = merge_schema(StrictSchema(), DEFAULT_SCHEMA)
        self.assertIs(schema.nested_errors, NestedErrors.RAISE)


class TestPrefix(TestCase):
    def test_custom_prefix(self):
        member = Member({"title": "Dr", "_raw": "r"})
        self.assertEqual(member.m_title, "Dr")
        self.assertEqual(member._raw, "r")
        self.assertEqual(member.to_json(), {"title": "Dr", "_raw": "r"})

    def test_toggle_with_custom_prefix(self):
        self.assertEqual(Member({"m_title": "Dr"}).m_title, "Dr")
        self.assertEqual(Member({"m__raw": "r"})._raw, "r")

    def test_inherited_prefix(self):
        child = PrefixedChild({"m_title": "Dr", "rank": "2"})
        self.assertEqual(child.m_title, "Dr")
        self.assertEqual(child.m_rank, 2)
        self.assertEqual(PrefixedChild.__merged_schema__.internal_prefix, "m_")


class TestInheritance(TestCase):
    def test_fields_order(self):
        self.assertEqual(
            [f.field_name for f in Child.__fields__],
            ["_id", "_name", "_age"],
        )

    def test_override(self):
        child = Child({"id": 5, "name": "n", "age": "3"})
        self.assertEqual(child._id, "5")
        self.assertEqual(child.to_json(), {"id": "5", "name": "n", "age": 3})

    def test_parent_unchanged(self):
        self.assertEqual(Parent({"id": "5"})._id, 5)

import pytest

from realmgen.core.field_types import FieldKind, Language
from realmgen.core.properties import BaseProperty, InverseRelation, ToManyRelation, ToOneRelation, TypedField
from realmgen.core.schema import Schema


def _model(name="Item"):
    return Schema("com.example").model(name)


# ---------------------------------------------------------------------------
# TypedField: object kinds
# ---------------------------------------------------------------------------

def test_required_string():
    decl = _model().string("title", required=True).rendered_declaration()
    assert decl.android == 'var title: String = ""'
    assert decl.ios == '@objc dynamic var title: String = ""'


def test_optional_string_uses_null_literals():
    decl = _model().string("title").rendered_declaration()
    assert decl.android == "var title: String? = null"
    assert decl.ios == "@objc dynamic var title: String? = nil"


def test_required_date_and_binary():
    m = _model()
    assert m.date("createdAt", required=True).rendered_declaration().ios == "@objc dynamic var createdAt: Date = Date()"
    assert m.data("blob", required=True).rendered_declaration().android == "var blob: ByteArray = byteArrayOf()"


def test_optional_binary():
    decl = _model().data("blob").rendered_declaration()
    assert decl.ios == "@objc dynamic var blob: Data? = nil"
    assert decl.android == "var blob: ByteArray? = null"


# ---------------------------------------------------------------------------
# TypedField: primitive kinds
# ---------------------------------------------------------------------------

def test_optional_int_is_wrapped_on_ios():
    decl = _model().int("count").rendered_declaration()
    assert decl.android == "var count: Int? = null"
    assert decl.ios == "let count = RealmOptional<Int32>()"


def test_required_int_is_plain_mutable_field():
    decl = _model().int("count", required=True).rendered_declaration()
    assert decl.android == "var count: Int = 0"
    assert decl.ios == "@objc dynamic var count: Int32 = 0"


def test_required_long_and_bool():
    m = _model()
    assert m.long("total", required=True).rendered_declaration().android == "var total: Long = 0L"
    assert m.bool("done", required=True).rendered_declaration().ios == "@objc dynamic var done: Bool = false"


def test_optional_bool():
    decl = _model().bool("done").rendered_declaration()
    assert decl.ios == "let done = RealmOptional<Bool>()"
    assert decl.android == "var done: Boolean? = null"


def test_double_builder_maps_to_float():
    prop = _model().double("ratio", required=True)
    assert prop.kind is FieldKind.FLOAT32
    assert prop.rendered_declaration().android == "var ratio: Float = 0.0f"


def test_generic_field_builder_reaches_double_kind():
    prop = _model().field("ratio", FieldKind.FLOAT64, required=True)
    assert prop.rendered_declaration().android == "var ratio: Double = 0.0"
    assert prop.rendered_declaration().ios == "@objc dynamic var ratio: Double = 0.0"


def test_declaration_by_language():
    prop = _model().string("title", required=True)
    assert prop.declaration(Language.KOTLIN) == 'var title: String = ""'
    assert prop.declaration("swift") == '@objc dynamic var title: String = ""'


# ---------------------------------------------------------------------------
# Primary key
# ---------------------------------------------------------------------------

def test_primary_key_annotation_only_on_kotlin_side():
    m = _model()
    pk = m.string("id", required=True, primary_key=True)
    other = m.string("name", required=True)

    assert pk.is_primary_key
    assert pk.primary_key_annotation == "@PrimaryKey "
    assert pk.rendered_declaration().android == '@PrimaryKey var id: String = ""'
    assert pk.rendered_declaration().ios == '@objc dynamic var id: String = ""'

    assert not other.is_primary_key
    assert other.primary_key_annotation == ""
    assert not other.rendered_declaration().android.startswith("@PrimaryKey")


def test_primary_key_is_reference_equality():
    m = _model()
    a = m.string("id", required=True)
    twin = TypedField(model=m, name="id", kind=FieldKind.STRING, required=True)
    m.primary_key = twin
    assert not a.is_primary_key
    assert twin.is_primary_key


def test_reassigning_primary_key_moves_marker():
    m = _model()
    a = m.string("a", required=True, primary_key=True)
    b = m.long("b", required=True)
    m.primary_key = b
    assert a.primary_key_annotation == ""
    assert b.rendered_declaration().android == "@PrimaryKey var b: Long = 0L"


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------

def test_to_one_relation_references_target():
    schema = Schema("com.example")
    person = schema.model("Person")
    dog = schema.model("Dog")
    rel = dog.obj("owner", person)

    assert isinstance(rel, ToOneRelation)
    assert rel.is_relation and not rel.is_list_relation and not rel.is_linking_objects
    assert rel.rendered_declaration().ios == "@objc dynamic var owner: Person? = nil"
    assert rel.rendered_declaration().android == "var owner: Person? = null"


def test_to_many_relation():
    schema = Schema("com.example")
    person = schema.model("Person")
    dog = schema.model("Dog")
    rel = person.list("dogs", dog)

    assert isinstance(rel, ToManyRelation)
    assert rel.is_relation and rel.is_list_relation
    assert rel.rendered_declaration().ios == "let dogs = List<Dog>()"
    assert rel.rendered_declaration().android == "val dogs: RealmList<Dog> = RealmList()"


def test_inverse_relation_rendering():
    schema = Schema("com.example")
    person = schema.model("Person")
    dog = schema.model("Dog")
    person.list("dogs", dog, create_linking_objects=True, linking_objects_name="owners")
    inverse = dog.properties[0]

    assert isinstance(inverse, InverseRelation)
    assert inverse.is_linking_objects and not inverse.is_relation
    assert inverse.rendered_declaration().ios == 'let owners = LinkingObjects(fromType: Person.self, property: "dogs")'
    assert inverse.rendered_declaration().android == '@LinkingObjects("dogs") val owners: RealmResults<Person>? = null'


def test_private_inverse_relation():
    schema = Schema("com.example")
    person = schema.model("Person")
    dog = schema.model("Dog")
    dog.obj("walker", person, create_linking_objects=True, linking_objects_name="walked", linking_objects_is_private=True)
    inverse = person.properties[0]

    assert inverse.rendered_declaration().ios.startswith("private let walked = ")
    assert '@LinkingObjects("walker") private val walked' in inverse.rendered_declaration().android


def test_only_typed_fields_can_be_indexed():
    schema = Schema("com.example")
    person = schema.model("Person")
    dog = schema.model("Dog")
    assert person.string("name", indexed=True).indexed
    assert not person.obj("dog", dog).indexed


def test_base_property_is_abstract():
    with pytest.raises(TypeError):
        BaseProperty()

    class NoDeclaration(BaseProperty):
        pass

    with pytest.raises(TypeError):
        NoDeclaration()

import pytest

from realmgen.config.settings import GeneratorSettings
from realmgen.core.schema import Schema, realm_schema


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # Settings resolution must not pick up the developer's shell.
    monkeypatch.delenv("REALMGEN_CONFIG_FILE", raising=False)
    monkeypatch.delenv("REALMGEN_TEMPLATES_DIR", raising=False)


@pytest.fixture()
def settings() -> GeneratorSettings:
    return GeneratorSettings()


def build_pet_schema() -> Schema:
    schema = realm_schema("com.example.pets", module_name="Pets")
    person = schema.model("Person")
    dog = schema.model("Dog")

    person.string("id", required=True, primary_key=True)
    person.string("name", required=True, indexed=True)
    person.int("age")
    person.date("birthday")
    person.list("dogs", dog, create_linking_objects=True, linking_objects_name="owners")

    dog.string("name", required=True)
    dog.double("weight", required=True)
    dog.obj("walker", person)
    return schema


@pytest.fixture()
def pet_schema() -> Schema:
    return build_pet_schema()


@pytest.fixture()
def pet_schema_factory():
    return build_pet_schema

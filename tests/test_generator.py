"""
Тесты для сборки view-модели
"""

import pytest
from pydantic import ValidationError
from swagger_codegen.config import GeneratorOptions
from swagger_codegen.exceptions import (
    MalformedDocumentError,
    ReferenceResolutionError,
    UnsupportedVersionError,
)
from swagger_codegen.generator import CodeGenerator, generate_view_model
from swagger_codegen.internal.parser.document import parse_document


class TestVersion:
    """Тесты проверки версии"""

    @pytest.mark.parametrize("version", ["3.0.0", "1.2", 2.0, None])
    def test_unsupported_version(self, petstore, version):
        """Тест что поддерживается только swagger "2.0" """
        petstore["swagger"] = version

        with pytest.raises(UnsupportedVersionError) as exc_info:
            generate_view_model(petstore)

        assert exc_info.value.version == version

    def test_version_checked_before_traversal(self):
        """Тест что версия проверяется раньше разбора документа"""
        with pytest.raises(UnsupportedVersionError):
            generate_view_model({"openapi": "3.0.0", "paths": "not a mapping"})

    def test_malformed_paths(self):
        """Тест paths не словарем"""
        with pytest.raises(MalformedDocumentError):
            generate_view_model({"swagger": "2.0", "paths": ["/pets"]})


class TestMethods:
    """Тесты методов view-модели"""

    def test_methods_in_document_order(self, petstore):
        """Тест порядка методов"""
        view = generate_view_model(petstore)

        assert [(m.method, m.path) for m in view.methods] == [
            ("GET", "/pets"),
            ("POST", "/pets"),
            ("GET", "/pets/{id}"),
            ("DELETE", "/pets/{id}"),
        ]
        assert view.method_names() == [
            "pets_list_all",
            "postPets",
            "getPetsById",
            "deletePetsById",
        ]

    def test_path_filter(self, petstore):
        """Тест generate_for_path"""
        petstore["paths"]["/stores/{storeId}"] = {
            "get": {"responses": {"200": {"schema": {"$ref": "#/definitions/Store"}}}}
        }
        petstore["definitions"]["Store"] = {"type": "object"}

        view = generate_view_model(petstore, GeneratorOptions(generate_for_path="STORES"))

        assert view.method_names() == ["getStoresByStoreId"]
        assert view.types_to_import == ("Store", "PetOwner")

    def test_reference_error_aborts(self, petstore):
        """Тест что ошибка ссылки прерывает сборку целиком"""
        petstore["paths"]["/pets"]["get"]["parameters"].append({"$ref": "#/parameters/nope"})

        with pytest.raises(ReferenceResolutionError):
            generate_view_model(petstore)

    def test_reference_error_outside_path_filter_aborts(self, petstore):
        """Тест что ошибка ссылки в пути вне фильтра тоже прерывает сборку"""
        petstore["paths"]["/users"] = {
            "get": {"parameters": [{"$ref": "#/parameters/missing"}], "responses": {}}
        }

        with pytest.raises(ReferenceResolutionError):
            generate_view_model(petstore, GeneratorOptions(generate_for_path="pets"))

    def test_vendor_extensions_in_path_item_are_skipped(self, petstore):
        """Тест что x-* ключи path item не разбираются как операции"""
        petstore["paths"]["/pets"]["x-internal"] = {"responses": "not a mapping"}

        document = parse_document(petstore)
        view = generate_view_model(petstore)

        assert set(document.paths["/pets"].operations) == {"get", "post"}
        assert view.method_names()[:2] == ["pets_list_all", "postPets"]


class TestImports:
    """Тесты набора импортируемых типов"""

    def test_types_to_import(self, petstore):
        """Тест сбора и дедупликации импортов"""
        view = generate_view_model(petstore)

        assert view.types_to_import == ("Pet", "NewPet", "PetOwner")
        assert view.types_to_import_statement == (
            "import { Pet, NewPet, PetOwner } from './types';"
        )

    def test_builtin_types_are_not_imported(self):
        """Тест что встроенные типы не импортируются"""
        raw = {
            "swagger": "2.0",
            "paths": {
                "/a": {"get": {"responses": {"200": {"schema": {"type": "string"}}}}},
                "/b": {"get": {"responses": {"200": {"description": "ok"}}}},
                "/c": {"get": {"responses": {}}},
                "/d": {
                    "get": {
                        "responses": {
                            "200": {"schema": {"type": "array", "items": {"type": "number"}}}
                        }
                    }
                },
                "/e": {
                    "get": {
                        "responses": {
                            "200": {"schema": {"type": "string", "enum": ["x", "y"]}}
                        }
                    }
                },
            },
        }
        view = generate_view_model(raw)

        assert view.types_to_import == ()
        assert view.types_to_import_statement == "import {  } from './types';"

    def test_single_import_for_repeated_reference(self, petstore):
        """Тест что тип импортируется один раз"""
        for verb in ("put", "patch"):
            petstore["paths"]["/pets/{id}"][verb] = {
                "parameters": [
                    {"name": "pet", "in": "body", "schema": {"$ref": "#/definitions/Pet"}}
                ],
                "responses": {"200": {"schema": {"$ref": "#/definitions/Pet"}}},
            }

        view = generate_view_model(petstore)
        assert view.types_to_import.count("Pet") == 1


class TestDefinitions:
    """Тесты definitions"""

    def test_definitions(self, petstore):
        """Тест экспортируемых типов"""
        view = generate_view_model(petstore)

        assert [d.name for d in view.definitions] == ["Pet", "NewPet", "PetOwner"]
        pet = view.definitions[0]
        assert pet.description == "A pet"
        assert [p.name for p in pet.type_expression.properties] == ["id", "name", "tag", "owner"]


class TestDocumentMetadata:
    """Тесты метаданных документа"""

    def test_domain(self, petstore):
        """Тест домена из schemes, host и basePath"""
        view = generate_view_model(petstore)

        assert view.domain == "https://petstore.example.com/v1"
        assert view.base_path == "/v1/"
        assert view.description == "Pet store API"

    @pytest.mark.parametrize("missing", ["schemes", "host", "basePath"])
    def test_domain_requires_all_parts(self, petstore, missing):
        """Тест пустого домена без одной из частей"""
        del petstore[missing]
        assert generate_view_model(petstore).domain == ""

    def test_security_flags(self, petstore):
        """Тест флагов безопасности документа"""
        view = generate_view_model(petstore)

        assert view.is_secure
        assert view.is_secure_token
        assert view.is_secure_api_key
        assert not view.is_secure_basic

    def test_options_passthrough(self, petstore):
        """Тест полей из настроек"""
        options = GeneratorOptions(
            class_name="PetClient", module_name="pets", is_es6=True, imports=("a",)
        )
        view = generate_view_model(petstore, options)

        assert view.class_name == "PetClient"
        assert view.module_name == "pets"
        assert view.is_es6
        assert view.imports == ("a",)
        assert {m.class_name for m in view.methods} == {"PetClient"}

    def test_parsed_document_input(self, petstore):
        """Тест сборки из уже разобранного документа"""
        view = CodeGenerator(parse_document(petstore)).view_model()
        assert len(view.methods) == 4


class TestViewModel:
    """Тесты неизменяемости и контекста шаблонов"""

    def test_frozen(self, petstore):
        """Тест что модель нельзя изменить"""
        view = generate_view_model(petstore)

        with pytest.raises(ValidationError):
            view.domain = "changed"

    def test_context_uses_template_keys(self, petstore):
        """Тест ключей контекста в camelCase"""
        context = generate_view_model(petstore).to_context({"version": "1.0"})

        assert context["isES6"] is False
        assert context["isSecureToken"] is True
        assert context["typesToImport"] == ("Pet", "NewPet", "PetOwner")
        assert context["version"] == "1.0"

        method = context["methods"][0]
        assert method["methodName"] == "pets_list_all"
        assert method["successfulResponseType"] == "Array<Pet>"
        assert method["parameters"][1]["isPatternType"] is True
        assert method["parameters"][1]["typeExpression"]["expression"] == "string"

"""
Тесты для имен методов и типов
"""

import pytest
from swagger_codegen.internal.utils import (
    camel_case,
    derive_path_method_name,
    to_identifier,
    to_safe_type_name,
)


class TestCamelCase:
    """Тесты camelCase"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("pet_store_model", "petStoreModel"),
            ("user-id", "userId"),
            ("X-Request-ID", "xRequestId"),
            ("XMLHttpRequest", "xmlHttpRequest"),
            ("filter[name]", "filterName"),
            ("page2size", "page2Size"),
            ("naïve-name", "naiveName"),
            ("größe", "grosse"),
            ("Œuvre_Ångström", "oeuvreAngstrom"),
            ("", ""),
        ],
    )
    def test_camel_case(self, raw, expected):
        """Тест разбиения на слова и склейки"""
        assert camel_case(raw) == expected


class TestIdentifiers:
    """Тесты идентификаторов из operationId и имен схем"""

    def test_to_identifier_replaces_separators(self):
        """Тест замены точек, дефисов и фигурных скобок"""
        assert to_identifier("pets.list-all{id}") == "pets_list_all_id_"

    def test_to_identifier_keeps_plain_names(self):
        """Тест что обычное имя не меняется"""
        assert to_identifier("listPets") == "listPets"

    def test_safe_type_name(self):
        """Тест имени экспортируемого типа"""
        assert to_safe_type_name("pet-store.model") == "PetStoreModel"
        assert to_safe_type_name("Pet") == "Pet"
        assert to_safe_type_name("order_item") == "OrderItem"

    def test_safe_type_name_collision_is_not_resolved(self):
        """Тест что разные имена могут дать одно и то же безопасное имя"""
        assert to_safe_type_name("pet.model") == to_safe_type_name("pet-model")


class TestPathMethodName:
    """Тесты имени метода по пути"""

    @pytest.mark.parametrize("path", ["/", ""])
    def test_root_path(self, path):
        """Тест корневого пути - только HTTP метод"""
        assert derive_path_method_name("get", path) == "get"
        assert derive_path_method_name("GET", path) == "get"

    def test_path_parameter_segment(self):
        """Тест сегмента с параметром пути"""
        assert derive_path_method_name("GET", "/users/{userId}") == "getUsersByUserId"

    def test_single_letter_parameter(self):
        """Тест параметра из одной буквы"""
        assert derive_path_method_name("get", "/pets/{id}") == "getPetsById"

    def test_trailing_slash(self):
        """Тест пути с завершающим слешем"""
        assert derive_path_method_name("post", "/pets/") == "postPets"

    def test_nested_path(self):
        """Тест вложенного пути"""
        assert (
            derive_path_method_name("delete", "/stores/{storeId}/order-items/{itemId}")
            == "deleteStoresByStoreIdOrderItemsByItemId"
        )

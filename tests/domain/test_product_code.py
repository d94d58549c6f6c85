"""Unit tests for product code rules."""

import pytest

from stockroom.domain.model.product_code import is_valid_code, normalize, same_key


class TestIsValidCode:

    @pytest.mark.parametrize(
        "code",
        ["A12T-4GH7-QPL9-3N4M", "a12t-4gh7-qpl9-3n4m", "0g44-gm33-4jf9-FGM4", "0000-0000-0000-0000"],
    )
    def test_accepts_grouped_alphanumerics(self, code):
        assert is_valid_code(code)

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "A12T-4GH7-QPL9-3N4M-",
            "A12T4GH7QPL93N4M",
            "A12T-4GH7-QPL9",
            "A12T-4GH7-QPL9-3N4",
            "A12T-4GH7-QPL9-3N4MM",
            "A12T_4GH7_QPL9_3N4M",
            "A12T-4GH7-QPL9-3N4!",
            " A12T-4GH7-QPL9-3N4M",
            "A12T-4GH7-QPL9-3N4M\n",
        ],
    )
    def test_rejects_anything_else(self, code):
        assert not is_valid_code(code)

    def test_name_is_not_a_code(self):
        assert not is_valid_code("Tomato")


class TestNormalize:

    def test_folds_case(self):
        assert normalize("a12T-4Gh7-QPl9-3n4M") == normalize("A12T-4GH7-QPL9-3N4M")

    def test_same_key(self):
        assert same_key("ToMaTo", "tomato")
        assert not same_key("tomatoe", "tomato")

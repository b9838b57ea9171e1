"""Tests for locale file loading."""

import json

import pytest

from speakable_time.config import ConfigurationError
from speakable_time.enums import Words
from speakable_time.translator import load_locale, load_translation_file, resolve_locale_file
from speakable_time.translator.loader import locale_candidates


@pytest.fixture
def locale_dir(tmp_path):
    (tmp_path / "C.json").write_text(json.dumps({"ago": "ago"}))
    (tmp_path / "es.json").write_text(json.dumps({"ago": "hace", "days": "días"}))
    (tmp_path / "pt-BR.json").write_text(json.dumps({"ago": "atrás"}))
    return tmp_path


class TestLocaleCandidates:
    @pytest.mark.parametrize(
        "locale,expected",
        [
            ("en-US", ["en-US", "en", "C"]),
            ("en", ["en", "C"]),
            ("C", ["C"]),
        ],
    )
    def test_fallback_order(self, locale, expected):
        assert locale_candidates(locale) == expected


class TestResolveLocaleFile:
    def test_exact_match(self, locale_dir):
        assert resolve_locale_file(locale_dir, "pt-BR") == locale_dir / "pt-BR.json"

    def test_language_fallback(self, locale_dir):
        assert resolve_locale_file(locale_dir, "es-MX") == locale_dir / "es.json"

    def test_c_fallback(self, locale_dir):
        assert resolve_locale_file(locale_dir, "fr-FR") == locale_dir / "C.json"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="locale directory is missing"):
            resolve_locale_file(tmp_path / "absent", "en")

    def test_no_candidate(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to load translations"):
            resolve_locale_file(tmp_path, "en")


class TestLoadTranslationFile:
    def test_loads_locale(self, locale_dir):
        translator = load_locale(locale_dir, "es-ES")

        assert translator.format("3 %{days} %{ago}") == "3 días hace"

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "C.json"
        path.write_text(json.dumps(["ago"]))

        with pytest.raises(ConfigurationError, match="Expected a JSON object"):
            load_translation_file(path)

    def test_rejects_invalid_json(self, tmp_path):
        path = tmp_path / "C.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="invalid format"):
            load_translation_file(path)

    def test_rejects_unknown_words(self, tmp_path):
        path = tmp_path / "C.json"
        path.write_text(json.dumps({"fortnight": "x"}))

        with pytest.raises(ConfigurationError, match="fortnight"):
            load_translation_file(path)

    def test_translation_table_contents(self, locale_dir):
        translator = load_translation_file(locale_dir / "es.json")

        assert dict(translator.mapping) == {Words.AGO: "hace", Words.DAYS: "días"}


@pytest.fixture
def yaml_locale_dir(tmp_path):
    (tmp_path / "C.yml").write_text("ago: ago\nfrom now: from now\n", encoding="utf-8")
    (tmp_path / "de.yml").write_text("ago: vor\ndays: Tage\nfrom now: ab jetzt\n", encoding="utf-8")
    (tmp_path / "ja.yaml").write_text("ago: 前\n", encoding="utf-8")
    return tmp_path


class TestYamlLocales:
    def test_loads_yml_locale(self, yaml_locale_dir):
        translator = load_locale(yaml_locale_dir, "de-AT")

        assert translator.format("2 %{days} %{ago}") == "2 Tage vor"
        assert translator.translate(Words.FROM_NOW) == "ab jetzt"

    def test_falls_back_to_c_yml(self, yaml_locale_dir):
        assert resolve_locale_file(yaml_locale_dir, "fr-FR") == yaml_locale_dir / "C.yml"
        assert load_locale(yaml_locale_dir, "fr-FR").translate(Words.AGO) == "ago"

    def test_yaml_extension(self, yaml_locale_dir):
        assert load_locale(yaml_locale_dir, "ja").translate(Words.AGO) == "前"

    def test_yml_preferred_over_json(self, yaml_locale_dir):
        (yaml_locale_dir / "de.json").write_text(json.dumps({"ago": "json"}))

        assert resolve_locale_file(yaml_locale_dir, "de") == yaml_locale_dir / "de.yml"

    def test_specific_json_beats_language_yml(self, yaml_locale_dir):
        (yaml_locale_dir / "de-CH.json").write_text(json.dumps({"ago": "vor"}))

        assert resolve_locale_file(yaml_locale_dir, "de-CH") == yaml_locale_dir / "de-CH.json"

    def test_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "C.yml"
        path.write_text("- ago\n- days\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Expected a YAML mapping"):
            load_translation_file(path)

    def test_rejects_invalid_yaml(self, tmp_path):
        path = tmp_path / "C.yml"
        path.write_text("ago: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="invalid format"):
            load_translation_file(path)

    def test_rejects_unsupported_suffix(self, tmp_path):
        path = tmp_path / "C.toml"
        path.write_text('ago = "ago"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError, match=".yml"):
            load_translation_file(path)

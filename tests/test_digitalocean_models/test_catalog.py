"""Tests for the static model catalog."""
from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from digitalocean_models.catalog import (
    CATALOG_VERSION,
    MODEL_CATALOG,
    CatalogData,
    get_model_info,
    list_models,
    load_catalog,
)
from digitalocean_models.catalog.types import (
    DEFAULT_COST,
    ModelCost,
    ModelDefinition,
)
from digitalocean_models.errors import CatalogError


# ---------------------------------------------------------------------------
# TestModelDefinition
# ---------------------------------------------------------------------------


class TestModelDefinition:
    def test_construction(self) -> None:
        model = ModelDefinition(
            id="test-model",
            name="Test Model",
            reasoning=True,
            input=("text", "image"),
            context_window=4096,
            max_tokens=1024,
        )
        assert model.id == "test-model"
        assert model.name == "Test Model"
        assert model.reasoning is True
        assert model.supports_vision is True
        assert model.context_window == 4096
        assert model.max_tokens == 1024

    def test_defaults(self) -> None:
        model = ModelDefinition(id="m", name="M")
        assert model.reasoning is False
        assert model.input == ("text",)
        assert model.cost == DEFAULT_COST
        assert model.context_window == 128000
        assert model.max_tokens == 8192
        assert model.supports_vision is False

    def test_frozen(self) -> None:
        model = ModelDefinition(id="m", name="M")
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.id = "other"  # type: ignore[misc]

    def test_list_input_becomes_tuple(self) -> None:
        model = ModelDefinition(id="m", name="M", input=["text", "image"])  # type: ignore[arg-type]
        assert model.input == ("text", "image")

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            ModelDefinition(id="", name="M")

    def test_empty_input_rejected(self) -> None:
        with pytest.raises(ValueError, match="input modality"):
            ModelDefinition(id="m", name="M", input=())

    def test_unknown_modality_rejected(self) -> None:
        with pytest.raises(ValueError, match="audio"):
            ModelDefinition(id="m", name="M", input=("text", "audio"))

    def test_non_positive_limits_rejected(self) -> None:
        with pytest.raises(ValueError):
            ModelDefinition(id="m", name="M", context_window=0)
        with pytest.raises(ValueError):
            ModelDefinition(id="m", name="M", max_tokens=-1)

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValueError, match="cache_read"):
            ModelCost(cache_read=-0.1)

    def test_to_dict_shape(self) -> None:
        model = ModelDefinition(
            id="m", name="M", reasoning=True, input=("text", "image"),
            context_window=200000, max_tokens=64000,
        )
        assert model.to_dict() == {
            "id": "m",
            "name": "M",
            "reasoning": True,
            "input": ["text", "image"],
            "cost": {"input": 0.0, "output": 0.0, "cacheRead": 0.0, "cacheWrite": 0.0},
            "contextWindow": 200000,
            "maxTokens": 64000,
        }

    def test_from_dict_defaults(self) -> None:
        model = ModelDefinition.from_dict({"id": "bare"})
        assert model.name == "bare"
        assert model.cost is DEFAULT_COST
        assert model.context_window == 128000
        assert model.max_tokens == 8192

    def test_from_dict_rejects_string_boolean(self) -> None:
        with pytest.raises(ValueError, match="reasoning"):
            ModelDefinition.from_dict({"id": "m", "reasoning": "false"})

    def test_from_dict_rejects_fractional_limit(self) -> None:
        with pytest.raises(ValueError, match="contextWindow"):
            ModelDefinition.from_dict({"id": "m", "contextWindow": 1.9})

    def test_from_dict_reads_export_shape(self) -> None:
        original = get_model_info("openai-gpt-4.1")
        assert original is not None
        assert ModelDefinition.from_dict(original.to_dict()) == original


# ---------------------------------------------------------------------------
# TestPackagedCatalog
# ---------------------------------------------------------------------------


class TestPackagedCatalog:
    def test_count(self) -> None:
        assert len(MODEL_CATALOG) == 31

    def test_is_tuple(self) -> None:
        assert isinstance(MODEL_CATALOG, tuple)

    def test_unique_ids(self) -> None:
        ids = [m.id for m in MODEL_CATALOG]
        assert len(ids) == len(set(ids))

    def test_all_costs_zero(self) -> None:
        assert all(m.cost == DEFAULT_COST for m in MODEL_CATALOG)

    def test_version_present(self) -> None:
        assert CATALOG_VERSION

    def test_definition_order(self) -> None:
        assert MODEL_CATALOG[0].id == "anthropic-claude-4.5-sonnet"
        assert MODEL_CATALOG[-1].id == "mistral-nemo-instruct-2407"

    def test_provider_families(self) -> None:
        anthropic = [m for m in MODEL_CATALOG if m.id.startswith("anthropic-")]
        openai = [m for m in MODEL_CATALOG if m.id.startswith("openai-")]
        assert len(anthropic) == 11
        assert len(openai) == 15

    def test_load_catalog_matches_module_constant(self) -> None:
        data = load_catalog()
        assert data.provider == "digitalocean"
        assert data.models == MODEL_CATALOG


# ---------------------------------------------------------------------------
# TestGetModelInfo
# ---------------------------------------------------------------------------


class TestGetModelInfo:
    def test_exact_id_match(self) -> None:
        model = get_model_info("anthropic-claude-3.7-sonnet")
        assert model is not None
        assert model.name == "Claude 3.7 Sonnet"
        assert model.reasoning is True
        assert model.max_tokens == 128000

    def test_text_only_model(self) -> None:
        model = get_model_info("openai-gpt-oss-120b")
        assert model is not None
        assert model.input == ("text",)
        assert model.context_window == 131072

    def test_large_context_window(self) -> None:
        model = get_model_info("openai-gpt-4.1")
        assert model is not None
        assert model.context_window == 1048576

    def test_unknown_returns_none(self) -> None:
        assert get_model_info("nonexistent-model") is None

    def test_case_sensitive(self) -> None:
        assert get_model_info("OpenAI-GPT-4o") is None


# ---------------------------------------------------------------------------
# TestListModels
# ---------------------------------------------------------------------------


class TestListModels:
    def test_all_models(self) -> None:
        assert list_models() == list(MODEL_CATALOG)

    def test_returns_new_list(self) -> None:
        first = list_models()
        first.clear()
        assert len(list_models()) == 31

    def test_reasoning_filter(self) -> None:
        models = list_models("reasoning")
        assert models
        assert all(m.reasoning for m in models)
        assert "deepseek-r1-distill-llama-70b" in {m.id for m in models}

    def test_vision_filter(self) -> None:
        models = list_models("vision")
        assert all(m.supports_vision for m in models)
        assert "llama3-8b-instruct" not in {m.id for m in models}

    def test_unknown_capability(self) -> None:
        with pytest.raises(ValueError):
            list_models("tools")


# ---------------------------------------------------------------------------
# TestLoadCatalog
# ---------------------------------------------------------------------------


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadCatalog:
    def test_custom_resource(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {
            "provider": "custom",
            "version": "1",
            "models": [{"id": "a", "name": "A", "input": ["text"]}],
        })
        data = load_catalog(path)
        assert isinstance(data, CatalogData)
        assert data.provider == "custom"
        assert data.version == "1"
        assert [m.id for m in data.models] == ["a"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_models_must_be_list(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="models"):
            load_catalog(_write(tmp_path, {"models": {"id": "a"}}))

    def test_entry_without_id(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="entry 0"):
            load_catalog(_write(tmp_path, {"models": [{"name": "A"}]}))

    def test_entry_with_bad_modality(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="entry 1"):
            load_catalog(_write(tmp_path, {"models": [
                {"id": "a"},
                {"id": "b", "input": ["video"]},
            ]}))

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="duplicate"):
            load_catalog(_write(tmp_path, {"models": [{"id": "a"}, {"id": "a"}]}))

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("reasoning", "false"),
            ("reasoning", 1),
            ("contextWindow", 1.9),
            ("contextWindow", "128000"),
            ("maxTokens", True),
        ],
    )
    def test_wrong_field_types_rejected(self, tmp_path: Path, field: str, value: object) -> None:
        with pytest.raises(CatalogError, match=field):
            load_catalog(_write(tmp_path, {"models": [{"id": "a", field: value}]}))

"""Unit tests for ColonyConfig defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from colonybot import ColonyConfig


class TestDefaults:
    def test_defaults(self):
        config = ColonyConfig()
        assert config.population_floor == 5
        assert config.min_generalists == 2
        assert config.builder_cap == 2
        assert config.memory_gc_interval == 1000
        assert config.max_body_parts == 50

    def test_rejects_oversized_bodies(self):
        with pytest.raises(ValidationError):
            ColonyConfig(max_body_parts=51)

    def test_rejects_zero_gc_interval(self):
        with pytest.raises(ValidationError):
            ColonyConfig(memory_gc_interval=0)


class TestFromEnv:
    def test_reads_prefixed_variables(self):
        config = ColonyConfig.from_env(
            {"COLONY_POPULATION_FLOOR": "8", "COLONY_BUILDER_CAP": "3", "OTHER": "x"}
        )
        assert config.population_floor == 8
        assert config.builder_cap == 3
        assert config.min_generalists == 2

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("COLONY_MEMORY_GC_INTERVAL", "50")
        assert ColonyConfig.from_env().memory_gc_interval == 50

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            ColonyConfig.from_env({"COLONY_POPULATION_FLOOR": "-1"})

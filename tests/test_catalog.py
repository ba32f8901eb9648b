"""Tests for the static agent catalog and category classifier."""

import pytest

from swarm_fleet.catalog import (
    ALL_AGENT_NAMES,
    ALL_SUBAGENT_NAMES,
    CATEGORY_KEYS,
    ORCHESTRATOR_NAME,
    PIPELINE_AGENTS,
    REVIEWER_AGENTS,
    SPECIALIST_AGENTS,
    category_key,
    classify,
    is_reviewer,
    is_specialist,
    is_subagent,
)
from swarm_fleet.models import AgentCategory


class TestClassify:
    def test_orchestrator(self):
        assert classify("architect") is AgentCategory.ORCHESTRATOR

    @pytest.mark.parametrize("name", ["sme_network", "sme_active_directory", "sme_swift"])
    def test_specialists(self, name):
        assert classify(name) is AgentCategory.SPECIALIST

    @pytest.mark.parametrize("name", ["security_reviewer", "auditor"])
    def test_reviewers(self, name):
        assert classify(name) is AgentCategory.QUALITY_REVIEWER

    @pytest.mark.parametrize("name", ["explorer", "coder", "test_engineer"])
    def test_pipeline_workers(self, name):
        assert classify(name) is AgentCategory.PIPELINE_WORKER

    def test_unknown_name_falls_back_to_pipeline_worker(self):
        assert classify("nonexistent") is AgentCategory.PIPELINE_WORKER
        assert classify("") is AgentCategory.PIPELINE_WORKER

    def test_qualified_name_is_not_classified_by_prefix(self):
        # Classification takes base names; a prefixed name is unknown
        assert classify("local_architect") is AgentCategory.PIPELINE_WORKER


class TestCatalogTables:
    def test_category_sets_are_disjoint(self):
        sets = [set(SPECIALIST_AGENTS), set(REVIEWER_AGENTS), set(PIPELINE_AGENTS), {ORCHESTRATOR_NAME}]
        total = sum(len(s) for s in sets)
        assert len(set().union(*sets)) == total

    def test_all_agent_names(self):
        assert ALL_AGENT_NAMES[0] == "architect"
        assert len(ALL_AGENT_NAMES) == 1 + len(ALL_SUBAGENT_NAMES)

    def test_predicates(self):
        assert is_specialist("sme_python")
        assert not is_specialist("coder")
        assert is_reviewer("auditor")
        assert not is_reviewer("sme_security")
        assert is_subagent("coder")
        assert not is_subagent("architect")

    def test_category_keys(self):
        assert category_key(AgentCategory.SPECIALIST) == "_specialist"
        assert category_key(AgentCategory.QUALITY_REVIEWER) == "_reviewer"
        assert category_key(AgentCategory.PIPELINE_WORKER) == "_pipeline"
        assert category_key(AgentCategory.ORCHESTRATOR) is None

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_KEYS[AgentCategory.ORCHESTRATOR] = "_orchestrator"  # type: ignore[index]

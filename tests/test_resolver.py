"""Tests for model and parameter resolution."""

from swarm_fleet.catalog import FALLBACK_MODEL
from swarm_fleet.config import AgentOverride
from swarm_fleet.resolver import is_disabled, resolve_model, resolve_parameter, resolve_parameters


class TestResolveModel:
    def test_builtin_per_agent_default(self):
        assert resolve_model("coder") == "anthropic/claude-sonnet-4-5"
        assert resolve_model("explorer") == "google/gemini-2.0-flash"

    def test_builtin_category_default(self):
        assert resolve_model("sme_python") == "google/gemini-2.0-flash"
        assert resolve_model("auditor") == "google/gemini-2.0-flash"

    def test_unknown_agent_gets_global_fallback(self):
        assert resolve_model("mystery") == FALLBACK_MODEL

    def test_precedence_chain(self):
        overrides = {
            "coder": AgentOverride(model="X"),
            "_pipeline": AgentOverride(model="Y"),
        }
        assert resolve_model("coder", overrides) == "X"
        del overrides["coder"]
        assert resolve_model("coder", overrides) == "Y"
        del overrides["_pipeline"]
        assert resolve_model("coder", overrides) == "anthropic/claude-sonnet-4-5"

    def test_specialist_category_override(self):
        overrides = {"_specialist": AgentOverride(model="openai/gpt-4o")}
        assert resolve_model("sme_network", overrides) == "openai/gpt-4o"
        assert resolve_model("coder", overrides) == "anthropic/claude-sonnet-4-5"

    def test_reviewer_category_override(self):
        overrides = {"_reviewer": AgentOverride(model="R")}
        assert resolve_model("security_reviewer", overrides) == "R"
        assert resolve_model("auditor", overrides) == "R"
        assert resolve_model("sme_security", overrides) == "google/gemini-2.0-flash"

    def test_orchestrator_ignores_category_keys(self):
        overrides = {k: AgentOverride(model="Z") for k in ("_specialist", "_reviewer", "_pipeline")}
        assert resolve_model("architect", overrides) == "anthropic/claude-sonnet-4-5"

    def test_explicit_without_model_falls_through(self):
        overrides = {
            "sme_api": AgentOverride(temperature=0.9),
            "_specialist": AgentOverride(model="S"),
        }
        assert resolve_model("sme_api", overrides) == "S"

    def test_unknown_override_key_ignored(self):
        overrides = {"not_an_agent": AgentOverride(model="N")}
        assert resolve_model("coder", overrides) == "anthropic/claude-sonnet-4-5"

    def test_pseudo_key_as_base_name_does_what_it_asks(self):
        overrides = {"_specialist": AgentOverride(model="S")}
        assert resolve_model("_specialist", overrides) == "S"


class TestResolveParameter:
    def test_builtin_per_agent(self):
        assert resolve_parameter("architect", "temperature") == 0.1
        assert resolve_parameter("coder", "temperature") == 0.2

    def test_builtin_category(self):
        assert resolve_parameter("sme_linux", "temperature") == 0.2

    def test_global_fallback(self):
        assert resolve_parameter("mystery", "temperature") == 0.1

    def test_explicit_override(self):
        overrides = {"coder": AgentOverride(temperature=0.7)}
        assert resolve_parameter("coder", "temperature", overrides) == 0.7

    def test_zero_is_a_real_override(self):
        overrides = {"coder": AgentOverride(temperature=0.0)}
        assert resolve_parameter("coder", "temperature", overrides) == 0.0

    def test_category_override(self):
        overrides = {"_specialist": AgentOverride(temperature=0.5)}
        assert resolve_parameter("sme_web", "temperature", overrides) == 0.5
        assert resolve_parameter("coder", "temperature", overrides) == 0.2

    def test_explicit_beats_category(self):
        overrides = {
            "sme_web": AgentOverride(temperature=0.9),
            "_specialist": AgentOverride(temperature=0.5),
        }
        assert resolve_parameter("sme_web", "temperature", overrides) == 0.9

    def test_unknown_parameter(self):
        assert resolve_parameter("coder", "top_k") is None

    def test_resolve_parameters(self):
        assert resolve_parameters("auditor") == {"temperature": 0.1}


class TestIsDisabled:
    def test_default_enabled(self):
        assert is_disabled("coder") is False
        assert is_disabled("coder", {}) is False

    def test_explicit_disable(self):
        assert is_disabled("coder", {"coder": AgentOverride(disabled=True)}) is True

    def test_explicit_false(self):
        assert is_disabled("coder", {"coder": AgentOverride(disabled=False)}) is False

    def test_category_key_never_disables(self):
        overrides = {"_specialist": AgentOverride(disabled=True)}
        assert is_disabled("sme_python", overrides) is False

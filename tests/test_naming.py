"""Tests for name qualification and mention rewriting."""

from swarm_fleet.naming import base_of, is_qualified, qualify, rewrite_references, swarm_prefix


class TestQualify:
    def test_default_swarm_is_identity(self):
        assert qualify("default", True, "coder") == "coder"
        assert qualify("beta", True, "coder") == "coder"

    def test_non_default_swarm_prefixes(self):
        assert qualify("local", False, "coder") == "local_coder"
        assert qualify("local", False, "sme_network") == "local_sme_network"

    def test_swarm_prefix(self):
        assert swarm_prefix("local", True) == ""
        assert swarm_prefix("local", False) == "local_"


class TestBaseOf:
    def test_with_swarm_id(self):
        assert base_of("local_security_reviewer", "local") == "security_reviewer"
        assert base_of("my_swarm_coder", "my_swarm") == "coder"

    def test_with_swarm_id_not_prefixed(self):
        assert base_of("coder", "local") == "coder"

    def test_catalog_names_unchanged(self):
        assert base_of("security_reviewer") == "security_reviewer"
        assert base_of("sme_active_directory") == "sme_active_directory"
        assert base_of("coder") == "coder"

    def test_heuristic_strips_first_segment(self):
        assert base_of("local_coder") == "coder"
        assert base_of("local_security_reviewer") == "security_reviewer"

    def test_heuristic_is_ambiguous_for_underscored_swarm_ids(self):
        assert base_of("my_swarm_coder") == "swarm_coder"

    def test_is_qualified(self):
        assert is_qualified("local_coder")
        assert not is_qualified("coder")
        assert not is_qualified("test_engineer")
        assert is_qualified("local_coder", "local")
        assert not is_qualified("coder", "local")


class TestRewriteReferences:
    TEXT = (
        "Scan via @explorer, then implement via @coder.\n"
        "Consult @sme_security and @sme_active_directory.\n"
        "Review: @security_reviewer, @auditor. Tests: @test_engineer."
    )

    def test_default_swarm_unchanged(self):
        assert rewrite_references(self.TEXT, "default", True) == self.TEXT

    def test_fixed_mentions_rewritten(self):
        out = rewrite_references(self.TEXT, "local", False)
        assert "@local_explorer" in out
        assert "@local_coder" in out
        assert "@local_security_reviewer" in out
        assert "@local_auditor" in out
        assert "@local_test_engineer" in out

    def test_specialist_wildcard_rewritten(self):
        out = rewrite_references(self.TEXT, "local", False)
        assert "@local_sme_security" in out
        assert "@local_sme_active_directory" in out

    def test_every_mention_rewritten(self):
        out = rewrite_references("@coder @coder\n@coder.", "local", False)
        assert out == "@local_coder @local_coder\n@local_coder."

    def test_unknown_specialist_still_rewritten(self):
        assert rewrite_references("@sme_kafka", "x", False) == "@x_sme_kafka"

    def test_word_boundaries_respected(self):
        text = "@coders and mail@coder.io and @architect"
        assert rewrite_references(text, "local", False) == text

    def test_rewrite_is_single_pass(self):
        # A swarm named like the specialist prefix must not be rewritten twice
        assert rewrite_references("@coder @sme_api", "sme", False) == "@sme_coder @sme_sme_api"

    def test_already_qualified_mentions_untouched(self):
        text = "@local_coder and @local_sme_api"
        assert rewrite_references(text, "local", False) == text

    def test_empty_text(self):
        assert rewrite_references("", "local", False) == ""

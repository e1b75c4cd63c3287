"""
Unit tests for assigning source bundles to targets.
"""
import pytest

from bundling.errors import ConfigurationError, UnknownBundleError
from bundling.models import SourceBundle, TargetConfig
from bundling.partition import bundle_ranks, partition


def make_bundles(graph):
    """Create resolved bundles from a dict of name -> dependency names."""
    return {name: SourceBundle(name=name, depends=deps) for name, deps in graph.items()}


def target(depends=(), **kwargs):
    kwargs.setdefault("base_path", "/web")
    kwargs.setdefault("base_url", "/")
    return TargetConfig(depends=list(depends), **kwargs)


@pytest.fixture
def bundles():
    return make_bundles({
        "jquery": [],
        "core": ["jquery"],
        "widgets": ["core"],
        "admin": ["widgets"],
        "charts": ["core"],
    })


class TestPartition:
    """Tests for partition()."""

    def test_implicit_target_takes_everything(self, bundles):
        """A single target with empty depends absorbs all bundles."""
        targets = partition({"all": target()}, bundles)
        assert sorted(targets["all"].depends) == sorted(bundles)

    def test_every_bundle_in_exactly_one_target(self, bundles):
        """Explicit and implicit targets form a partition of the bundles."""
        configs = {
            "admin-all": target(["admin", "widgets"]),
            "rest": target(),
        }
        targets = partition(configs, bundles)
        assigned = [name for t in targets.values() for name in t.depends]
        assert sorted(assigned) == sorted(bundles)
        assert targets["rest"].depends == ["jquery", "core", "charts"]

    def test_depends_sorted_by_dependency_order(self, bundles):
        """Explicit depends are reordered so dependencies come first."""
        targets = partition({"t": target(["admin", "jquery", "widgets", "core"])}, bundles)
        assert targets["t"].depends == ["jquery", "core", "widgets", "admin"]

    def test_end_to_end_order(self):
        """core is placed before widgets in the implicit target."""
        bundles = make_bundles({"widgets": ["core"], "core": []})
        targets = partition({"all": target()}, bundles)
        assert targets["all"].depends == ["core", "widgets"]

    def test_two_implicit_targets_rejected(self, bundles):
        """Only one target may have empty depends."""
        with pytest.raises(ConfigurationError) as exc_info:
            partition({"a": target(), "b": target()}, bundles)
        assert "Only one target" in exc_info.value.message

    def test_bundle_in_two_targets_rejected(self, bundles):
        """Two targets claiming the same bundle are named in the error."""
        configs = {"first": target(["core"]), "second": target(["widgets", "core"])}
        with pytest.raises(ConfigurationError) as exc_info:
            partition(configs, bundles)
        assert "'first'" in exc_info.value.message
        assert "'second'" in exc_info.value.message
        assert exc_info.value.bundle == "core"

    def test_unresolved_member_rejected(self, bundles):
        """A target listing a bundle that was not resolved raises UnknownBundleError."""
        configs = {"extra": target(["ghost"]), "all": target()}
        with pytest.raises(UnknownBundleError) as exc_info:
            partition(configs, bundles)
        assert exc_info.value.name == "ghost"
        assert "'extra'" in exc_info.value.suggestion

    def test_missing_base_path(self, bundles):
        with pytest.raises(ConfigurationError) as exc_info:
            partition({"all": TargetConfig(base_url="/")}, bundles)
        assert "base_path" in exc_info.value.message
        assert exc_info.value.bundle == "all"

    def test_missing_base_url(self, bundles):
        with pytest.raises(ConfigurationError) as exc_info:
            partition({"all": TargetConfig(base_path="/web")}, bundles)
        assert "base_url" in exc_info.value.message

    def test_target_named_like_bundle(self, bundles):
        """A target cannot reuse a source bundle's name."""
        with pytest.raises(ConfigurationError):
            partition({"core": target()}, bundles)

    def test_patterns_copied(self, bundles):
        targets = partition({"all": target(js="all-{hash}.js")}, bundles)
        assert targets["all"].pattern("js") == "all-{hash}.js"
        assert targets["all"].pattern("css") is None
        assert targets["all"].js == []


class TestBundleRanks:
    """Tests for bundle_ranks()."""

    def test_ranks_are_unique_and_consistent(self, bundles):
        ranks = bundle_ranks(bundles)
        assert sorted(ranks.values()) == list(range(len(bundles)))
        for name, bundle in bundles.items():
            for dep in bundle.depends:
                assert ranks[dep] < ranks[name]

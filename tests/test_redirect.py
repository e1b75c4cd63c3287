"""
Unit tests for dependency redirection after build.
"""
import pytest

from bundling.errors import CircularDependencyError, UnknownBundleError
from bundling.graph import dependency_order
from bundling.models import SourceBundle, TargetBundle, TargetConfig
from bundling.partition import partition
from bundling.redirect import absorbed_by, redirect


def make_bundles(graph):
    return {name: SourceBundle(name=name, depends=deps) for name, deps in graph.items()}


def make_target(name, depends):
    return TargetBundle(name=name, base_path="/web", base_url="/", depends=depends)


class TestRedirect:
    """Tests for redirect()."""

    def test_single_target(self):
        """Absorbed bundles become pass-throughs to their target."""
        bundles = make_bundles({"core": [], "widgets": ["core"]})
        targets = {"all": make_target("all", ["core", "widgets"])}
        result = redirect(targets, bundles)

        assert result["all"].depends == []
        assert result["core"].depends == ["all"]
        assert result["widgets"].depends == ["all"]
        assert result["core"].js == []
        assert result["core"].base_path is None

    def test_targets_come_first(self):
        bundles = make_bundles({"core": []})
        result = redirect({"all": make_target("all", ["core"])}, bundles)
        assert list(result) == ["all", "core"]

    def test_target_depends_on_other_targets(self):
        """Cross-target source dependencies become target dependencies."""
        bundles = make_bundles({
            "jquery": [],
            "core": ["jquery"],
            "admin": ["core", "jquery"],
        })
        targets = {
            "vendor": make_target("vendor", ["jquery"]),
            "app": make_target("app", ["core", "admin"]),
        }
        result = redirect(targets, bundles)

        assert result["app"].depends == ["vendor"]
        assert result["vendor"].depends == []
        assert result["admin"].depends == ["app"]
        assert result["jquery"].depends == ["vendor"]

    def test_result_graph_is_acyclic(self):
        """Re-running cycle detection on the redirected graph succeeds."""
        bundles = make_bundles({
            "a": [], "b": ["a"], "c": ["b"], "d": ["c", "a"],
        })
        configs = {
            "first": TargetConfig(depends=["a", "b"], base_path="/web", base_url="/"),
            "rest": TargetConfig(base_path="/web", base_url="/"),
        }
        result = redirect(partition(configs, bundles), bundles)
        order = dependency_order(result, lambda name: result[name].depends)
        assert set(order) == set(result)
        for name in ("a", "b"):
            assert result[name].depends == ["first"]
        for name in ("c", "d"):
            assert result[name].depends == ["rest"]

    def test_interleaved_targets_form_cycle(self):
        """Two targets absorbing interdependent bundles are rejected."""
        bundles = make_bundles({"a": [], "b": ["a"], "c": ["b"]})
        targets = {
            "outer": make_target("outer", ["a", "c"]),
            "inner": make_target("inner", ["b"]),
        }
        with pytest.raises(CircularDependencyError) as exc_info:
            redirect(targets, bundles)
        assert exc_info.value.kind == "target"
        assert exc_info.value.name in ("outer", "inner")

    def test_unabsorbed_dependency_kept(self):
        """A bundle outside every target stays a dependency by name."""
        bundles = make_bundles({"jquery": [], "app": ["jquery"]})
        result = redirect({"app-min": make_target("app-min", ["app"])}, bundles)
        assert result["app-min"].depends == ["jquery"]
        assert "jquery" not in result

    def test_cycle_through_unabsorbed_bundle(self):
        """target -> outside bundle -> target is a cycle too."""
        bundles = make_bundles({"a": [], "outside": ["a"], "b": ["outside"]})
        with pytest.raises(CircularDependencyError):
            redirect({"t": make_target("t", ["a", "b"])}, bundles)

    def test_unresolved_member(self):
        """A target absorbing an unknown bundle fails with its name."""
        bundles = make_bundles({"core": []})
        targets = {"extra": make_target("extra", ["ghost"]), "all": make_target("all", ["core"])}
        with pytest.raises(UnknownBundleError) as exc_info:
            redirect(targets, bundles)
        assert exc_info.value.name == "ghost"


class TestAbsorbedBy:
    def test_inverse_of_partition(self):
        targets = {"x": make_target("x", ["a", "b"]), "y": make_target("y", ["c"])}
        assert absorbed_by(targets) == {"a": "x", "b": "x", "c": "y"}

"""
Unit tests for Underbar object merging.
"""

from underbar.runtime.objects import defaults, extend


class TestExtend:
    """Tests for extend."""

    def test_returns_target(self):
        """Test extend mutates and returns the target."""
        target = {"a": 1}
        assert extend(target, [{"b": 2}]) is target
        assert target == {"a": 1, "b": 2}

    def test_overwrites(self):
        """Test extend overwrites existing keys."""
        assert extend({"a": 1}, [{"a": 2}]) == {"a": 2}

    def test_later_sources_win(self):
        """Test the last source to set a key wins."""
        assert extend({}, [{"a": 1, "b": 1}, {"a": 2}, {"a": 3}]) == {"a": 3, "b": 1}

    def test_no_sources(self):
        """Test extend with nothing to copy."""
        assert extend({"a": 1}, []) == {"a": 1}

    def test_sources_untouched(self):
        """Test extend leaves sources alone."""
        source = {"x": 1}
        extend({"y": 2}, [source])
        assert source == {"x": 1}

    def test_falsy_values_copied(self):
        """Test falsy values are copied like any other."""
        assert extend({"a": 1}, [{"a": None, "b": 0}]) == {"a": None, "b": 0}


class TestDefaults:
    """Tests for defaults."""

    def test_returns_target(self):
        """Test defaults mutates and returns the target."""
        target = {"a": 1}
        assert defaults(target, [{"b": 2}]) is target
        assert target == {"a": 1, "b": 2}

    def test_keeps_existing(self):
        """Test defaults never overwrites an existing key."""
        assert defaults({"a": 1}, [{"a": 2}]) == {"a": 1}

    def test_keeps_existing_falsy(self):
        """Test a falsy existing value still counts as present."""
        assert defaults({"a": None, "b": 0}, [{"a": 1, "b": 1}]) == {"a": None, "b": 0}

    def test_first_source_wins(self):
        """Test the first source to supply a missing key wins."""
        assert defaults({}, [{"a": 1}, {"a": 2, "b": 2}]) == {"a": 1, "b": 2}

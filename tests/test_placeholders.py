"""Tests for placeholder resolution."""

from unittest.mock import Mock

from route_resolver.routing.placeholders import (
    PropertyLookup,
    default_lookup,
    resolve_placeholders,
    split_placeholder,
)


class TestResolvePlaceholders:
    """Test resolve_placeholders function"""

    def test_default_used_for_missing_key(self):
        """Test '${key:default}' resolves to the default when key is absent"""
        lookup = Mock(side_effect=lambda key, default: default)

        assert resolve_placeholders("/${test.var.2:yaya}", lookup) == "/yaya"
        lookup.assert_called_once_with("test.var.2", "yaya")

    def test_value_from_lookup(self, lookup):
        """Test configured values replace placeholders"""
        assert resolve_placeholders("/${test.var}/index", lookup) == "/home/index"

    def test_missing_key_without_default(self, lookup):
        """Test unknown keys without default resolve to an empty string"""
        assert resolve_placeholders("/a/${missing}/b", lookup) == "/a//b"

    def test_default_may_contain_colons(self):
        """Test only the first colon separates key and default"""
        result = resolve_placeholders("${base:http://localhost:8080}")
        assert result == "http://localhost:8080"

    def test_replacement_is_not_rescanned(self):
        """Test values containing placeholder syntax are kept literally"""
        lookup = PropertyLookup({"a": "${b}", "b": "B"})
        assert resolve_placeholders("${a}/${b}", lookup) == "${b}/B"

    def test_identical_placeholders_each_resolved(self):
        """Test repeated placeholders are all replaced"""
        lookup = PropertyLookup({"a": "x"})
        assert resolve_placeholders("/${a}/${a}", lookup) == "/x/x"

    def test_lookup_called_left_to_right(self):
        """Test placeholders are resolved in template order"""
        lookup = Mock(return_value="v")

        resolve_placeholders("${first}/${second:2}/${third}", lookup)

        keys = [call.args for call in lookup.call_args_list]
        assert keys == [("first", ""), ("second", "2"), ("third", "")]

    def test_template_without_placeholders(self):
        """Test templates without placeholders are returned unchanged"""
        assert resolve_placeholders("/users/{id}/**") == "/users/{id}/**"


class TestSplitPlaceholder:
    """Test split_placeholder function"""

    def test_split(self):
        """Test key/default splitting"""
        assert split_placeholder("key") == ("key", "")
        assert split_placeholder("key:value") == ("key", "value")
        assert split_placeholder("key:") == ("key", "")
        assert split_placeholder("key:a:b") == ("key", "a:b")

    def test_default_lookup(self):
        """Test the fallback lookup always returns the default"""
        assert default_lookup("anything", "fallback") == "fallback"


class TestPropertyLookup:
    """Test PropertyLookup class"""

    def test_first_source_wins(self):
        """Test source order decides precedence"""
        lookup = PropertyLookup({"port": "9000"}, {"port": "8080", "host": "h"})

        assert lookup("port", "") == "9000"
        assert lookup("host", "") == "h"
        assert lookup("missing", "d") == "d"

    def test_get(self):
        """Test raw access without default"""
        lookup = PropertyLookup({"a": "1"})

        assert lookup.get("a") == "1"
        assert lookup.get("b") is None

    def test_non_string_values_converted(self):
        """Test values are converted to strings"""
        lookup = PropertyLookup({"port": 8080})
        assert lookup("port", "") == "8080"

    def test_empty_value_is_kept(self):
        """Test an empty configured value does not fall back to the default"""
        lookup = PropertyLookup({"prefix": ""})
        assert lookup("prefix", "api") == ""

    def test_from_environ_without_prefix(self):
        """Test environment variables are used as-is"""
        lookup = PropertyLookup.from_environ(environ={"HOME_PATH": "/home"})

        assert lookup("HOME_PATH", "") == "/home"
        assert lookup("home.path", "x") == "x"

    def test_from_environ_with_prefix(self):
        """Test prefixed variables map to dotted and dashed keys"""
        environ = {"APP_SERVER_BASE": "/srv", "OTHER": "x"}
        lookup = PropertyLookup.from_environ("APP_", environ=environ)

        assert lookup("server.base", "") == "/srv"
        assert lookup("server-base", "") == "/srv"
        assert lookup("server_base", "") == "/srv"
        assert lookup("other", "d") == "d"

    def test_from_process_environ(self, monkeypatch):
        """Test the process environment is used by default"""
        monkeypatch.setenv("ROUTES_API_VERSION", "v3")
        lookup = PropertyLookup.from_environ("ROUTES_")

        assert resolve_placeholders("/${api.version}", lookup) == "/v3"

    def test_repr(self):
        """Test lookup string representation"""
        assert repr(PropertyLookup({}, {})) == "PropertyLookup(sources=2)"

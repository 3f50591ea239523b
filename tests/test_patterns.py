"""Tests for the pattern library."""

from contact_parser.patterns import (
    EMAIL,
    FACEBOOK,
    INSTAGRAM,
    LINKEDIN,
    PHONE,
    SOCIAL,
    TWITTER,
    URL,
    Matcher,
    RawMatch,
)


class TestMatcher:
    """Test the Matcher wrapper."""

    def test_find_all_positions(self):
        """Test matches carry offsets into the source text."""
        matches = EMAIL.find_all("mail a@b.co now")
        assert matches == [RawMatch(text="a@b.co", start=5, end=11, group=None)]

    def test_find_all_no_match(self):
        """Test no match yields an empty list."""
        assert PHONE.find_all("no digits here") == []

    def test_group_captured(self):
        """Test the first group is exposed."""
        matcher = Matcher("word", r"#(\w+)")
        assert matcher.find_all("#tag")[0].group == "tag"

    def test_repr(self):
        """Test repr shows the matcher name."""
        assert repr(EMAIL) == "Matcher('email')"


class TestEmailPattern:
    """Test the email pattern."""

    def test_multiple(self):
        """Test several addresses are found in order."""
        texts = [m.text for m in EMAIL.find_all("a@b.co, x.y+z@mail.example.org")]
        assert texts == ["a@b.co", "x.y+z@mail.example.org"]

    def test_case_insensitive(self):
        """Test upper-case domains match."""
        assert EMAIL.find_all("JOHN@ACME.COM")[0].text == "JOHN@ACME.COM"


class TestPhonePattern:
    """Test the phone pattern."""

    def test_formats(self):
        """Test common US layouts match in full."""
        for text in [
            "(555) 123-4567",
            "555-123-4567",
            "555.123.4567",
            "555 123 4567",
            "5551234567",
            "+1 (555) 987-6543",
            "1-555-987-6543",
        ]:
            assert [m.text for m in PHONE.find_all(text)] == [text]

    def test_seven_digits(self):
        """Test local numbers without area code match."""
        assert PHONE.find_all("555-1234")[0].text == "555-1234"

    def test_long_digit_run(self):
        """Test an overly long digit run is not split into a phone."""
        assert PHONE.find_all("12345678901234") == []

    def test_does_not_span_lines(self):
        """Test digits on separate lines are not joined."""
        assert PHONE.find_all("555\n123\n4567") == []


class TestUrlPattern:
    """Test the URL pattern."""

    def test_forms(self):
        """Test scheme and www prefixes are optional."""
        assert URL.find_all("https://acme.com/about")[0].text == "https://acme.com/about"
        assert URL.find_all("www.acme.co.uk")[0].text == "www.acme.co.uk"
        assert URL.find_all("acme.io")[0].text == "acme.io"

    def test_email_domain_not_matched(self):
        """Test neither half of an email is taken as a URL."""
        assert URL.find_all("jane@example.com") == []
        assert URL.find_all("jane.doe@example.com") == []

    def test_colon_label(self):
        """Test a label glued on with a colon does not hide the URL."""
        assert URL.find_all("Web:www.acme.com")[0].text == "www.acme.com"
        assert URL.find_all("URL:https://acme.com")[0].text == "https://acme.com"

    def test_trailing_period(self):
        """Test a sentence-ending period is not part of the URL."""
        assert URL.find_all("Visit acme.com.")[0].text == "acme.com"


class TestSocialPatterns:
    """Test the per-service handle patterns."""

    def test_services_order(self):
        """Test all four services are defined."""
        assert [s.name for s in SOCIAL] == ["LinkedIn", "Twitter", "Instagram", "Facebook"]

    def test_linkedin(self):
        """Test profile URL and shorthand forms."""
        assert LINKEDIN.matcher.find_all("linkedin.com/in/jane-doe")[0].group == "jane-doe"
        assert LINKEDIN.matcher.find_all("linkedin: janedoe")[0].group == "janedoe"

    def test_twitter(self):
        """Test @handle and URL forms."""
        assert TWITTER.matcher.find_all("Follow @jdoe")[0].group == "jdoe"
        assert TWITTER.matcher.find_all("twitter.com/jdoe")[0].group == "jdoe"
        assert TWITTER.matcher.find_all("x.com/jdoe")[0].group == "jdoe"

    def test_twitter_ignores_email_and_other_shorthands(self):
        """Test the bare @ form skips emails and other services."""
        assert TWITTER.matcher.find_all("jane@example.com") == []
        assert TWITTER.matcher.find_all("@ig:janedoe") == []
        assert TWITTER.matcher.find_all("@linkedin:janedoe") == []
        assert TWITTER.matcher.find_all("fox.com/news") == []
        assert TWITTER.matcher.find_all("medium.com/@jane") == []

    def test_instagram(self):
        """Test URL and @ig: forms."""
        assert INSTAGRAM.matcher.find_all("instagram.com/jane.doe")[0].group == "jane.doe"
        assert INSTAGRAM.matcher.find_all("@ig: janedoe")[0].group == "janedoe"

    def test_facebook(self):
        """Test URL form."""
        assert FACEBOOK.matcher.find_all("facebook.com/jane.doe")[0].group == "jane.doe"

    def test_linkedin_kind(self):
        """Test the page kind is captured next to the handle."""
        match = LINKEDIN.matcher.find_all("linkedin.com/company/acme")[0]
        assert (match.group, match.kind) == ("acme", "company")
        assert LINKEDIN.matcher.find_all("linkedin: jdoe")[0].kind is None

    def test_resolve(self):
        """Test profile URL construction."""
        assert LINKEDIN.resolve("jdoe") == "https://www.linkedin.com/in/jdoe"
        assert LINKEDIN.resolve("acme", kind="company") == "https://www.linkedin.com/company/acme"
        assert TWITTER.resolve("jdoe") == "https://twitter.com/jdoe"

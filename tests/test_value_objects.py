"""Unit tests for student value objects, tags and indexes."""
import pytest
from pydantic import ValidationError

from edulog.domain.index import Index
from edulog.domain.student import Address, Email, Fee, Name, Phone
from edulog.domain.tag import Tag


class TestName:
    """Test Name validation."""

    @pytest.mark.parametrize("value", ["peter jack", "12345", "peter the 2nd", "Capital Tan",
                                       "David Roger Jackson Ray Jr 2nd"])
    def test_valid_names(self, value):
        """Test names made of letters, digits and spaces."""
        assert Name.is_valid(value)
        assert Name(value).full_name == value

    @pytest.mark.parametrize("value", ["", " ", "^", "peter*", " peter"])
    def test_invalid_names(self, value):
        """Test blank names and names with symbols."""
        assert not Name.is_valid(value)
        with pytest.raises(ValidationError) as exc_info:
            Name(value)
        assert Name.MESSAGE_CONSTRAINTS in str(exc_info.value)

    def test_none_rejected(self):
        """Test that None is not a name."""
        with pytest.raises(ValidationError):
            Name(None)


class TestPhone:
    """Test Phone validation."""

    @pytest.mark.parametrize("value", ["911", "93121534", "124293842033123"])
    def test_valid_phones(self, value):
        """Test digit strings of length 3 or more."""
        assert Phone.is_valid(value)

    @pytest.mark.parametrize("value", ["", " ", "91", "phone", "9011p041", "9312 1534", "+6593121534"])
    def test_invalid_phones(self, value):
        """Test short numbers and non-digits."""
        assert not Phone.is_valid(value)


class TestEmail:
    """Test Email validation."""

    @pytest.mark.parametrize("value", ["alice@example.com", "a.b-c_d+e@example.com",
                                       "peter_jack@very-long-domain.example.com"])
    def test_valid_emails(self, value):
        """Test well-formed addresses."""
        assert Email.is_valid(value)
        assert str(Email(value)) == value

    @pytest.mark.parametrize("value", ["a@bc", "student@school.test", "tutor@localhost",
                                       "admin@printer.local"])
    def test_non_public_domains_rejected(self, value):
        """Test that single-word and reserved domains are refused, as the message says."""
        assert not Email.is_valid(value)
        assert "Single-word domains" in Email.MESSAGE_CONSTRAINTS
        assert ".test" in Email.MESSAGE_CONSTRAINTS

    @pytest.mark.parametrize("value", ["", " ", "@example.com", "peterjack", "peterjack@",
                                       "peter jack@example.com", "peterjack@example..com",
                                       ".peterjack@example.com"])
    def test_invalid_emails(self, value):
        """Test missing parts, spaces and misplaced periods."""
        assert not Email.is_valid(value)


class TestAddress:
    """Test Address validation."""

    @pytest.mark.parametrize("value", ["Blk 456, Den Road, #01-355", "-", "Leng Inc; 1234 Market St"])
    def test_valid_addresses(self, value):
        """Test that any non-blank text is an address."""
        assert Address.is_valid(value)

    @pytest.mark.parametrize("value", ["", " ", " Blk 456"])
    def test_invalid_addresses(self, value):
        """Test blank text and leading whitespace."""
        assert not Address.is_valid(value)


class TestFee:
    """Test Fee validation."""

    @pytest.mark.parametrize("value", ["0", "40", "999999999", "007"])
    def test_valid_fee_text(self, value):
        """Test digit strings up to nine digits."""
        assert Fee.is_valid(value)

    @pytest.mark.parametrize("value", ["", "-1", "1.5", "abc", " 40", "1000000000", "+5"])
    def test_invalid_fee_text(self, value):
        """Test signs, decimals, spaces and overlong numbers."""
        assert not Fee.is_valid(value)

    def test_fee_from_int(self):
        """Test building a fee from an integer."""
        assert Fee(40).amount == 40

    def test_negative_fee_rejected(self):
        """Test that a negative amount cannot be constructed."""
        with pytest.raises(ValidationError):
            Fee(-1)


class TestTag:
    """Test Tag validation and display."""

    def test_valid_tag(self):
        """Test an alphanumeric tag name."""
        tag = Tag("sec3")
        assert tag.tag_name == "sec3"
        assert str(tag) == "[sec3]"

    @pytest.mark.parametrize("value", ["", "two words", "sec-3", "#friends"])
    def test_invalid_tags(self, value):
        """Test tag names with spaces or symbols."""
        assert not Tag.is_valid(value)
        with pytest.raises(ValidationError):
            Tag(value)


class TestValueSemantics:
    """Test equality, hashing and immutability shared by value objects."""

    def test_equal_by_value(self):
        """Test that equal values give equal objects."""
        assert Name("Alice") == Name("Alice")
        assert Name("Alice") != Name("alice")
        assert hash(Tag("sec3")) == hash(Tag("sec3"))

    def test_different_types_not_equal(self):
        """Test that a name and a tag with the same text differ."""
        assert Name("sec3") != Tag("sec3")

    def test_value_cannot_change(self):
        """Test that value objects are frozen."""
        name = Name("Alice")
        with pytest.raises(ValidationError):
            name.value = "Bob"


class TestIndex:
    """Test Index conversions."""

    def test_one_based_round_trip(self):
        """Test that one-based and zero-based views agree."""
        index = Index.from_one_based(3)

        assert index.zero_based == 2
        assert index.one_based == 3
        assert str(index) == "3"

    def test_zero_based(self):
        """Test building from a zero-based position."""
        assert Index.from_zero_based(0).one_based == 1

    def test_equality(self):
        """Test that indexes compare by position."""
        assert Index.from_one_based(5) == Index.from_zero_based(4)
        assert Index.from_one_based(1) != Index.from_one_based(2)

    @pytest.mark.parametrize("factory, value", [
        (Index.from_one_based, 0),
        (Index.from_one_based, -1),
        (Index.from_zero_based, -1),
    ])
    def test_out_of_range(self, factory, value):
        """Test that positions before the first entry are refused."""
        with pytest.raises(IndexError):
            factory(value)

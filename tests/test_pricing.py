"""Unit tests for the pricing and volume-credit rules.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from theater.domain import Genre, PricingRules, UnknownPlayTypeError, amount_for, volume_credits_for
from theater.domain import pricing


class TestTragedyAmount:
    """Tests for tragedy pricing."""

    @pytest.mark.parametrize("audience", [0, 1, 15, 29, 30])
    def test_flat_base_up_to_threshold(self, audience):
        """Audiences at or below the threshold pay the base amount."""
        assert amount_for(Genre.TRAGEDY, audience) == pricing.TRAGEDY_BASE_AMOUNT

    @pytest.mark.parametrize("audience", [31, 40, 55, 200])
    def test_per_person_over_threshold(self, audience):
        """Each attendee past the threshold adds the per-person rate."""
        expected = pricing.TRAGEDY_BASE_AMOUNT + (
            audience - pricing.TRAGEDY_AUDIENCE_THRESHOLD
        ) * pricing.TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON
        assert amount_for(Genre.TRAGEDY, audience) == expected

    def test_big_co_example(self):
        """55 attendees: 40000 + 25 * 1000 cents."""
        assert amount_for("tragedy", 55) == 65000


class TestComedyAmount:
    """Tests for comedy pricing."""

    @pytest.mark.parametrize("audience", [0, 5, 20])
    def test_base_plus_flat_rate_up_to_threshold(self, audience):
        """The per-audience charge applies even below the threshold."""
        expected = pricing.COMEDY_BASE_AMOUNT + pricing.COMEDY_AMOUNT_PER_AUDIENCE * audience
        assert amount_for(Genre.COMEDY, audience) == expected

    @pytest.mark.parametrize("audience", [21, 35, 100])
    def test_surcharge_over_threshold(self, audience):
        """Past the threshold the surcharge and marginal rate stack on the flat rate."""
        expected = (
            pricing.COMEDY_BASE_AMOUNT
            + pricing.COMEDY_OVER_BASE_CAPACITY_AMOUNT
            + pricing.COMEDY_OVER_BASE_CAPACITY_PER_PERSON
            * (audience - pricing.COMEDY_AUDIENCE_THRESHOLD)
            + pricing.COMEDY_AMOUNT_PER_AUDIENCE * audience
        )
        assert amount_for(Genre.COMEDY, audience) == expected

    def test_comedy_example(self):
        """35 attendees: 30000 + 10000 + 15 * 500 + 35 * 300 cents."""
        assert amount_for("comedy", 35) == 58000


class TestUnknownType:
    """Tests for unsupported genre tags."""

    def test_amount_for_unknown_type_raises(self):
        """Amount computation never defaults for an unknown tag."""
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            amount_for("pastoral", 10)
        assert exc_info.value.play_type == "pastoral"

    def test_unhandled_genre_raises_domain_error(self, monkeypatch):
        """A parsed genre without a pricing branch still raises UnknownPlayTypeError."""
        monkeypatch.setattr(Genre, "parse", classmethod(lambda cls, value: value))
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            amount_for("pastoral", 10)
        assert exc_info.value.play_type == "pastoral"

    def test_volume_credits_do_not_validate_type(self):
        """Credit computation gives base credits for an unknown tag."""
        assert volume_credits_for("pastoral", 45) == 15


class TestVolumeCredits:
    """Tests for volume credits."""

    @pytest.mark.parametrize("audience", [0, 10, 30])
    def test_no_tragedy_credits_up_to_threshold(self, audience):
        assert volume_credits_for(Genre.TRAGEDY, audience) == 0

    def test_tragedy_credits_past_threshold(self):
        assert volume_credits_for(Genre.TRAGEDY, 55) == 25

    def test_comedy_example(self):
        """35 attendees: 5 base credits plus 35 // 5 bonus credits."""
        assert volume_credits_for(Genre.COMEDY, 35) == 12

    def test_comedy_bonus_drops_fractions(self):
        """Bonus credits round down."""
        assert volume_credits_for(Genre.COMEDY, 9) == 1
        assert volume_credits_for(Genre.COMEDY, 4) == 0

    @pytest.mark.parametrize("genre", list(Genre))
    def test_monotonic_in_audience(self, genre):
        """Credits never decrease as the audience grows."""
        credits = [volume_credits_for(genre, audience) for audience in range(0, 120)]
        assert credits == sorted(credits)

    @pytest.mark.parametrize("audience", [31, 34, 35, 50, 101])
    def test_comedy_bonus_over_tragedy(self, audience):
        """Above the base threshold comedy earns exactly the bonus on top."""
        difference = volume_credits_for(Genre.COMEDY, audience) - volume_credits_for(
            Genre.TRAGEDY, audience
        )
        assert difference == audience // pricing.COMEDY_EXTRA_VOLUME_FACTOR


class TestPricingRules:
    """Tests for custom rule sets."""

    def test_custom_rules_override_defaults(self):
        """Rules carry their own parameters."""
        rules = PricingRules(tragedy_base_amount=50000, tragedy_audience_threshold=40)
        assert rules.amount_for(Genre.TRAGEDY, 40) == 50000
        assert rules.amount_for(Genre.TRAGEDY, 41) == 51000

    def test_rules_are_immutable(self):
        """PricingRules cannot be changed after creation."""
        rules = PricingRules()
        with pytest.raises(AttributeError):
            rules.comedy_base_amount = 0

    def test_zero_credit_factor_rejected(self):
        """A zero comedy credit divisor is invalid."""
        with pytest.raises(ValueError):
            PricingRules(comedy_extra_volume_factor=0)

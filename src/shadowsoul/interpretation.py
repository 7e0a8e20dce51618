"""Soul-silhouette narrative selection from shadow length."""

from shadowsoul.models import Interpretation, Trait

_FOCUSED_TRAITS = (
    Trait("Directness", "You approach life with honesty", "arrow-right"),
    Trait("Clarity", "Your vision cuts through confusion", "eye"),
    Trait("Presence", "You live fully in the moment", "circle"),
)
_BALANCED_TRAITS = (
    Trait("Balance", "You find harmony in all things", "scale"),
    Trait("Wisdom", "Your choices reflect deep thought", "book"),
    Trait("Growth", "You evolve with each step", "trending-up"),
)
_PROFOUND_TRAITS = (
    Trait("Vision", "You see beyond the immediate", "telescope"),
    Trait("Influence", "Your impact extends far", "ripple"),
    Trait("Depth", "You think in dimensions", "layers"),
)

FOCUSED_TITLE = "The Focused Soul"
BALANCED_TITLE = "The Balanced Wanderer"
PROFOUND_TITLE = "The Profound Dreamer"

# Upper bounds (exclusive) of the Focused and Balanced bands, in feet
_FOCUSED_MAX_FT = 2.0
_BALANCED_MAX_FT = 5.0


def select_interpretation(
    shadow_length_feet: float, direction: str, footwear: str
) -> Interpretation:
    """Pick the narrative band for a shadow length.

    Bands are half-open: [0, 2) Focused, [2, 5) Balanced, [5, inf) Profound.

    Args:
        shadow_length_feet: Shadow length from ShadowResult.length_feet.
        direction: Compass point the person faces (Balanced band only).
        footwear: Shoe brand label.

    Returns:
        Interpretation with title, description, and exactly three traits.
    """
    length = f"{shadow_length_feet:.2f}"

    if shadow_length_feet < _FOCUSED_MAX_FT:
        return Interpretation(
            title=FOCUSED_TITLE,
            description=(
                f"Your shadow measures {length} feet, revealing a soul that stands tall "
                "in the light of truth. Like a sundial at noon, you cast minimal shadows "
                f"because you face life directly. Your {footwear} shoes ground you to "
                "reality while your spirit reaches for clarity."
            ),
            traits=_FOCUSED_TRAITS,
        )

    if shadow_length_feet < _BALANCED_MAX_FT:
        return Interpretation(
            title=BALANCED_TITLE,
            description=(
                f"At {length} feet, your shadow speaks of perfect equilibrium between "
                f"earth and sky. Facing {direction.lower()}, you navigate life with "
                f"measured steps in your {footwear} shoes, leaving a meaningful "
                "impression on the world."
            ),
            traits=_BALANCED_TRAITS,
        )

    return Interpretation(
        title=PROFOUND_TITLE,
        description=(
            f"Your {length}-foot shadow stretches across the earth like a bridge "
            f"between worlds. In your {footwear} shoes, you carry dreams that cast "
            "long shadows, influencing far more than your immediate presence suggests."
        ),
        traits=_PROFOUND_TRAITS,
    )

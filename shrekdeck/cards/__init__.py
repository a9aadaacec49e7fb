"""Card skins: the resolver interface and the stock implementations."""

from shrekdeck.cards.base import CardInfo, fold_accents, url_name
from shrekdeck.cards.bloodless import BloodlessCard
from shrekdeck.cards.template import Skin, TemplateCard, template_card_type

__all__ = [
    # base.py
    "CardInfo",
    "fold_accents",
    "url_name",
    # bloodless.py
    "BloodlessCard",
    # template.py
    "Skin",
    "TemplateCard",
    "template_card_type",
]

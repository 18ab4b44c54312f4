"""
Static content returned when the model reply cannot be parsed into the
expected structure. The same object is returned whatever the input;
results built from these are tagged `source="fallback"`.
"""
import copy
from typing import Any, Dict

from artisan_hub.domain.services.constants import (
    CONTENT_DESCRIPTION,
    CONTENT_LISTING,
    CONTENT_MARKETING_PACKAGE,
    CONTENT_SOCIAL,
    CONTENT_STORY,
    CONTENT_TITLE,
)

LISTING_FALLBACK: Dict[str, Any] = {
    "title": "Handcrafted Artisan Masterpiece",
    "shortDescription": "Authentic handcrafted item showcasing traditional Indian artistry and cultural heritage.",
    "longDescription": (
        "This exquisite handcrafted piece represents the finest in traditional Indian artistry. "
        "Each item is meticulously created by skilled artisans who have inherited their craft through "
        "generations, ensuring authenticity and unparalleled quality. The intricate details and cultural "
        "significance make this not just a purchase, but an investment in preserving traditional craftsmanship."
    ),
    "features": [
        "100% handcrafted by traditional artisans",
        "Authentic materials and techniques",
        "Unique cultural significance",
        "Supporting artisan communities",
        "Premium quality craftsmanship",
    ],
    "careInstructions": "Handle with care. Clean gently with soft cloth. Store in dry place away from direct sunlight.",
    "giftText": "Perfect gift for art lovers, cultural enthusiasts, and anyone who appreciates authentic handcrafted beauty.",
}

TITLE_FALLBACK: Dict[str, Any] = {
    "title": "Handcrafted Artisan Masterpiece",
}

STORY_FALLBACK: Dict[str, Any] = {
    "title": "Made by Hand, Carried by Tradition",
    "story": (
        "Behind every piece lies a story of dedication, inherited skill, and cultural pride. "
        "Our artisans have mastered their craft through generations, creating not just products, "
        "but pieces of living heritage that connect us to India's rich artistic traditions."
    ),
}

SOCIAL_FALLBACK: Dict[str, Any] = {
    "instagram": (
        "✨ Discover the magic of traditional craftsmanship! Each piece tells a story of heritage and skill. 🎨 "
        "#HandmadeInIndia #TraditionalCrafts #ArtisanMade #CulturalHeritage"
    ),
    "facebook": (
        "Support traditional artisans and bring home a piece of cultural heritage! Every purchase supports "
        "artisan communities and preserves ancient crafts."
    ),
    "twitter": "🎨 Authentic artisan crafts that tell stories of heritage & skill ✨ #HandmadeInIndia #ArtisanMade",
    "hashtags": ["#HandmadeInIndia", "#TraditionalCrafts", "#ArtisanMade", "#CulturalHeritage"],
}

MARKETING_PACKAGE_FALLBACK: Dict[str, Any] = {
    "seoTitle": "Authentic Handcrafted Masterpiece - Traditional Indian Artistry",
    "metaDescription": (
        "Discover authentic handcrafted items made by traditional Indian artisans. Premium quality, "
        "cultural heritage, and unique artistry in every piece."
    ),
    "instagramCaption": (
        "✨ Discover the magic of traditional craftsmanship! Each piece tells a story of heritage and skill. 🎨 "
        "#HandmadeInIndia #TraditionalCrafts #ArtisanMade #CulturalHeritage #SustainableShopping #IndianArt"
    ),
    "facebookPost": (
        "Support traditional artisans and bring home a piece of cultural heritage! Our handcrafted items are "
        "more than products - they're stories of skill, tradition, and artistry passed down through generations. "
        "Every purchase supports artisan communities and preserves ancient crafts."
    ),
    "whatsappMessage": (
        "🎨 Check out this amazing handcrafted piece! Made by traditional Indian artisans with incredible skill "
        "and attention to detail. Perfect for art lovers and anyone who appreciates authentic craftsmanship. "
        "What do you think?"
    ),
    "emailSubject": "Exclusive Handcrafted Treasures - Limited Artisan Collection",
    "productStory": STORY_FALLBACK["story"],
    "callToActions": [
        "Shop Now - Limited Pieces Available",
        "Support Artisan Communities Today",
        "Add to Cart - Free Shipping",
        "Discover Your Cultural Connection",
        "Gift Authentic Artistry",
    ],
}

_FALLBACKS: Dict[str, Dict[str, Any]] = {
    CONTENT_TITLE: TITLE_FALLBACK,
    CONTENT_DESCRIPTION: LISTING_FALLBACK,
    CONTENT_LISTING: LISTING_FALLBACK,
    CONTENT_STORY: STORY_FALLBACK,
    CONTENT_SOCIAL: SOCIAL_FALLBACK,
    CONTENT_MARKETING_PACKAGE: MARKETING_PACKAGE_FALLBACK,
}

def fallback_for(content_type: str) -> Dict[str, Any]:
    """Deep copy so callers can never mutate the shared constant."""
    try:
        return copy.deepcopy(_FALLBACKS[content_type])
    except KeyError:
        raise ValueError(f"No fallback content for type: {content_type}") from None

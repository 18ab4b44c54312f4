# artisan_hub/domain/services/social_svc.py

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.parse import quote
import uuid
import logging

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    FACEBOOK = "facebook"
    WHATSAPP = "whatsapp"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    PINTEREST = "pinterest"
    INSTAGRAM = "instagram"


# Platforms we write post templates for (share links exist for all of Platform)
POST_PLATFORMS = (Platform.INSTAGRAM, Platform.FACEBOOK, Platform.WHATSAPP, Platform.TWITTER)

TWITTER_HASHTAGS = "HandmadeInIndia,ArtisanMade"

DEFAULT_MESSAGES = {
    Platform.FACEBOOK: "Check out this amazing handcrafted piece!",
    Platform.WHATSAPP: "🎨 Check out this incredible handcrafted piece! Made by talented Indian artisans. Perfect for art lovers!",
    Platform.TWITTER: "🎨 Authentic artisan crafts!",
    Platform.PINTEREST: "Beautiful handcrafted artisan piece",
}

INSTAGRAM_STEPS = [
    "1. Save the product image to your device",
    "2. Open Instagram app",
    "3. Create a new post or story",
    "4. Upload the saved image",
    "5. Copy and paste the provided caption",
    "6. Add relevant hashtags and share!",
]
INSTAGRAM_CAPTION = (
    "✨ Discover authentic handcrafted beauty! 🎨 Each piece tells a story of tradition, skill, and cultural "
    "heritage. #HandmadeInIndia #TraditionalCrafts #ArtisanMade"
)


class UnsupportedPlatformError(ValueError):
    def __init__(self, name: str, supported: Iterable[Platform]):
        self.supported = [p.value for p in supported]
        super().__init__(f"Unsupported platform: {name}")


def supported_platforms() -> List[str]:
    return [p.value for p in Platform]


def parse_platform(name: str, allowed: Iterable[Platform] = tuple(Platform)) -> Platform:
    allowed = tuple(allowed)
    try:
        platform = Platform((name or "").strip().lower())
    except ValueError:
        raise UnsupportedPlatformError(name, allowed) from None
    if platform not in allowed:
        raise UnsupportedPlatformError(name, allowed)
    return platform


def encode_component(value: str) -> str:
    """Percent-encode like a URI component (unreserved marks kept as-is)."""
    return quote(value, safe="-_.!~*'()")


# =============================================================================
#                               SHARE LINK BUILDERS
# =============================================================================

@dataclass(frozen=True)
class ShareLink:
    platform: Platform
    url: Optional[str]
    instructions: Optional[Dict[str, Any]] = None


def _facebook(product_url: str, message: str) -> ShareLink:
    return ShareLink(
        Platform.FACEBOOK,
        f"https://www.facebook.com/sharer/sharer.php?u={encode_component(product_url)}"
        f"&quote={encode_component(message)}",
    )

def _whatsapp(product_url: str, message: str) -> ShareLink:
    return ShareLink(Platform.WHATSAPP, f"https://wa.me/?text={encode_component(message + ' ' + product_url)}")

def _twitter(product_url: str, message: str) -> ShareLink:
    return ShareLink(
        Platform.TWITTER,
        f"https://twitter.com/intent/tweet?text={encode_component(message)}"
        f"&url={encode_component(product_url)}&hashtags={TWITTER_HASHTAGS}",
    )

def _linkedin(product_url: str, message: str) -> ShareLink:
    return ShareLink(Platform.LINKEDIN, f"https://www.linkedin.com/sharing/share-offsite/?url={encode_component(product_url)}")

def _pinterest(product_url: str, message: str) -> ShareLink:
    return ShareLink(
        Platform.PINTEREST,
        f"https://pinterest.com/pin/create/button/?url={encode_component(product_url)}"
        f"&description={encode_component(message)}",
    )

def _instagram(product_url: str, message: str) -> ShareLink:
    # Instagram has no web share intent: the seller posts manually.
    return ShareLink(
        Platform.INSTAGRAM,
        None,
        instructions={"method": "manual", "steps": list(INSTAGRAM_STEPS), "caption": INSTAGRAM_CAPTION},
    )


_SHARE_BUILDERS: Dict[Platform, Callable[[str, str], ShareLink]] = {
    Platform.FACEBOOK: _facebook,
    Platform.WHATSAPP: _whatsapp,
    Platform.TWITTER: _twitter,
    Platform.LINKEDIN: _linkedin,
    Platform.PINTEREST: _pinterest,
    Platform.INSTAGRAM: _instagram,
}

_missing = set(Platform) - set(_SHARE_BUILDERS)
if _missing:
    raise RuntimeError(f"Share builders missing for: {sorted(p.value for p in _missing)}")


def build_share_link(platform: Platform, product_url: str, custom_message: Optional[str] = None) -> ShareLink:
    message = custom_message or DEFAULT_MESSAGES.get(platform, "")
    return _SHARE_BUILDERS[platform](product_url, message)


# =============================================================================
#                               POST TEMPLATES
# =============================================================================

def _instagram_post(product_url: str) -> Dict[str, Any]:
    return {
        "content": {
            "caption": (
                "✨ Discover authentic handcrafted beauty! 🎨\n\n"
                "Each piece tells a story of tradition, skill, and cultural heritage. Made by talented Indian "
                "artisans who pour their heart into every detail.\n\n"
                "#HandmadeInIndia #TraditionalCrafts #ArtisanMade #CulturalHeritage #IndianArt "
                "#SustainableShopping #AuthenticCrafts #ArtLovers #HandcraftedWithLove #SupportArtisans"
            ),
            "hashtags": ["#HandmadeInIndia", "#TraditionalCrafts", "#ArtisanMade", "#CulturalHeritage",
                         "#IndianArt", "#SustainableShopping"],
            "cta": "Shop now ➡️ Link in bio",
            "imageAspectRatio": "1:1",
            "storyVersion": "🎨 Authentic artisan crafts ✨ Swipe up to shop!",
        },
    }

def _facebook_post(product_url: str) -> Dict[str, Any]:
    return {
        "content": {
            "text": (
                "🎨 Support Traditional Artisans & Discover Authentic Beauty!\n\n"
                "Every handcrafted piece in our collection tells a unique story of skill, tradition, and cultural "
                "pride. When you choose our artisan-made products, you're not just buying something beautiful, "
                "you're supporting talented craftspeople and helping preserve centuries-old traditions.\n\n"
                "✨ What makes our products special:\n"
                "• 100% handcrafted by skilled artisans\n"
                "• Authentic traditional techniques\n"
                "• Premium quality materials\n"
                "• Unique cultural significance\n"
                "• Supporting artisan communities\n\n"
                "Bring home a piece of India's rich artistic heritage today!"
            ),
            "cta": "Shop Now",
            "linkDescription": "Explore our exclusive collection of handcrafted treasures",
            "targetAudience": "Art enthusiasts, cultural collectors, conscious consumers",
        },
    }

def _whatsapp_post(product_url: str) -> Dict[str, Any]:
    return {
        "content": {
            "message": (
                "🎨 *Check out this incredible handcrafted piece!*\n\n"
                "Made by talented Indian artisans using traditional techniques passed down through generations. "
                "The attention to detail and cultural authenticity is absolutely stunning! ✨\n\n"
                "*Perfect for:*\n"
                "• Art lovers & collectors\n"
                "• Unique home decor\n"
                "• Meaningful gifts\n"
                "• Supporting artisan communities\n\n"
                "What do you think? Would love to hear your thoughts! 😊\n\n"
                "👆 Tap to see more details"
            ),
            "mediaType": "image",
            "businessMessage": True,
        },
    }

def _twitter_post(product_url: str) -> Dict[str, Any]:
    return {
        "content": {
            "tweet": (
                "🎨 Authentic artisan crafts that tell stories of heritage & skill ✨\n\n"
                "Support traditional Indian artisans & bring home unique handcrafted beauty\n\n"
                "#HandmadeInIndia #ArtisanMade #CulturalHeritage #SustainableShopping\n\n"
                "🛒 Shop now:"
            ),
            "hashtags": ["#HandmadeInIndia", "#ArtisanMade", "#CulturalHeritage", "#SustainableShopping"],
            "characterCount": 280,
            "mediaAttachment": True,
        },
    }


_POST_TEMPLATES: Dict[Platform, Callable[[str], Dict[str, Any]]] = {
    Platform.INSTAGRAM: _instagram_post,
    Platform.FACEBOOK: _facebook_post,
    Platform.WHATSAPP: _whatsapp_post,
    Platform.TWITTER: _twitter_post,
}

# Share message used inside each generated post's link
_POST_SHARE_MESSAGES = {
    Platform.FACEBOOK: None,
    Platform.WHATSAPP: "🎨 Check out this amazing handcrafted piece! Made by traditional Indian artisans. Perfect for art lovers!",
    Platform.TWITTER: "🎨 Authentic artisan crafts that tell stories of heritage & skill ✨",
    Platform.INSTAGRAM: None,
}


@dataclass
class GeneratedPosts:
    posts: Dict[str, Dict[str, Any]]
    generated_at: datetime
    expires_at: datetime
    skipped: List[str] = field(default_factory=list)


def generate_posts(platforms: Iterable[str], product_url: str, *, ttl_hours: int = 24) -> GeneratedPosts:
    """
    Build one post per supported platform in `platforms`; unknown names are skipped.
    Raises UnsupportedPlatformError when nothing valid remains.
    """
    selected: List[Platform] = []
    skipped: List[str] = []
    for name in platforms:
        try:
            p = parse_platform(name, POST_PLATFORMS)
        except UnsupportedPlatformError:
            skipped.append(name)
            continue
        if p not in selected:
            selected.append(p)

    if not selected:
        raise UnsupportedPlatformError(", ".join(map(str, platforms)), POST_PLATFORMS)

    posts: Dict[str, Dict[str, Any]] = {}
    for p in selected:
        post = _POST_TEMPLATES[p](product_url)
        link = build_share_link(p, product_url, _POST_SHARE_MESSAGES.get(p))
        posts[p.value] = {
            "id": str(uuid.uuid4()),
            "platform": p.value,
            **post,
            "shareUrl": link.url,
        }
        if link.instructions:
            posts[p.value]["instructions"] = link.instructions

    now = datetime.now(timezone.utc)
    logger.debug(f"Generated posts platforms={list(posts)} skipped={skipped}")
    return GeneratedPosts(posts=posts, generated_at=now, expires_at=now + timedelta(hours=ttl_hours), skipped=skipped)

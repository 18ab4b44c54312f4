import json
from typing import Any, Dict, Optional

from artisan_hub.domain.services.constants import (
    CONTENT_DESCRIPTION,
    CONTENT_SOCIAL,
    CONTENT_STORY,
    CONTENT_TITLE,
)

SYSTEM_COPYWRITER = (
    "You write marketplace copy for handcrafted products made by Indian artisans. "
    "Be warm and authentic, never invent certifications. Return strict JSON only."
)

SYSTEM_VISION = "You annotate product photos for a marketplace catalog. Return strict JSON only."

def _product_json(product_data: Dict[str, Any]) -> str:
    return json.dumps(product_data, ensure_ascii=False, sort_keys=True, default=str)

def _language_rule(language: str) -> str:
    if not language or language.lower() in {"en", "english"}:
        return ""
    return f"\nWrite every text value in this language: {language}."

def content_prompt(content_type: str, product_data: Dict[str, Any], language: str = "en") -> str:
    """One fixed template per content type; JSON contract matches domain/models/content.py."""
    product = _product_json(product_data)
    lang = _language_rule(language)

    if content_type == CONTENT_TITLE:
        return (
            f"Generate a compelling product title for this handcrafted item: {product}.\n"
            "Make it SEO-friendly and appealing to customers. Maximum 60 characters."
            f"{lang}\n\n"
            'OUTPUT FORMAT: {"title":"..."}'
        )

    if content_type == CONTENT_DESCRIPTION:
        return (
            f"Write a detailed product description for this handcrafted item: {product}.\n"
            "Include materials, craftsmanship details, cultural significance, and benefits. "
            "Make it engaging and informative."
            f"{lang}\n\n"
            "OUTPUT FORMAT: "
            '{"title":"max 60 chars","shortDescription":"max 150 chars",'
            '"longDescription":"2-3 paragraphs","features":["...","..."],'
            '"careInstructions":"...","giftText":"..."}'
        )

    if content_type == CONTENT_STORY:
        return (
            f"Write a compelling artisan story about the creation of this product: {product}.\n"
            "Include cultural background, traditional techniques, and the artisan's passion. "
            "Make it authentic and emotional."
            f"{lang}\n\n"
            'OUTPUT FORMAT: {"title":"...","story":"..."}'
        )

    if content_type == CONTENT_SOCIAL:
        return (
            f"Create engaging social media captions for Instagram, Facebook, and Twitter for this product: {product}.\n"
            "Include relevant hashtags and a call-to-action. The Twitter caption must fit in 280 characters."
            f"{lang}\n\n"
            'OUTPUT FORMAT: {"instagram":"...","facebook":"...","twitter":"...","hashtags":["#..."]}'
        )

    raise ValueError(f"Unknown content type: {content_type}")

def listing_description_prompt(basic_info: Optional[Dict[str, Any]]) -> str:
    info = basic_info or {}
    return (
        "Create a compelling product description for a handcrafted item based on the following information:\n\n"
        f"Product Category: {info.get('category') or 'Handcrafted Item'}\n"
        f"Artisan Location: {info.get('location') or 'India'}\n"
        f"Price Range: {info.get('priceRange') or 'Premium'}\n"
        "Target Audience: Art enthusiasts, cultural collectors, gift buyers\n\n"
        "Please generate:\n"
        "1. A catchy product title (max 60 characters)\n"
        "2. A short description (max 150 characters for product cards)\n"
        "3. A detailed description (2-3 paragraphs highlighting craftsmanship, cultural significance, and uniqueness)\n"
        "4. Key features (3-5 bullet points)\n"
        "5. Care instructions\n"
        "6. Gift recommendation text\n\n"
        "Make it authentic, emphasizing the artisan's skill and cultural heritage. "
        "Use warm, engaging language that connects with buyers emotionally.\n\n"
        "OUTPUT FORMAT: "
        '{"title":"...","shortDescription":"...","longDescription":"...",'
        '"features":["...","...","..."],"careInstructions":"...","giftText":"..."}'
    )

def marketing_package_prompt(product: Dict[str, Any], artisan: Optional[Dict[str, Any]] = None) -> str:
    artisan = artisan or {}
    return (
        "Create a complete marketing package for a handcrafted product:\n\n"
        f"Product ID: {product.get('id')}\n"
        f"Title: {product.get('title')}\n"
        f"Category: {product.get('category')}\n"
        f"Description: {product.get('shortDescription') or ''}\n"
        f"Artisan: {artisan.get('name') or 'Traditional Artisan'}\n"
        f"Location: {artisan.get('location') or 'India'}\n\n"
        "Generate:\n"
        "1. SEO-optimized product title\n"
        "2. Meta description for website\n"
        "3. Instagram post caption (with hashtags)\n"
        "4. Facebook post text\n"
        "5. WhatsApp sharing message\n"
        "6. Email marketing subject line\n"
        "7. Product story (emotional connection)\n"
        "8. Call-to-action texts\n\n"
        "Make it culturally authentic and emotionally engaging.\n\n"
        "OUTPUT FORMAT: JSON with keys seoTitle, metaDescription, instagramCaption, facebookPost, "
        "whatsappMessage, emailSubject, productStory, callToActions (array)."
    )

def translation_prompt(text: str, target_language: str, source_language: str = "auto") -> str:
    source = "the detected language" if source_language in ("", "auto") else source_language
    return (
        f"Translate the following text from {source} to {target_language}. "
        "Keep names of places and crafts as they are.\n"
        'OUTPUT FORMAT: {"translatedText":"...","detectedLanguage":"<ISO-639-1 code of the source>"}\n\n'
        f"Input:\n{text}"
    )

def image_analysis_prompt() -> str:
    return (
        "Annotate this product photo for a handicraft marketplace.\n"
        "Return up to 10 labels and up to 10 visible objects with confidence scores between 0 and 1, "
        "a safe-search verdict (VERY_UNLIKELY, UNLIKELY, POSSIBLE, LIKELY, VERY_LIKELY) for adult, violence "
        "and racy content, and up to 5 dominant colors as hex codes.\n"
        'OUTPUT FORMAT (JSON): {"labels":[{"description":"...","score":0.0}],'
        '"objects":[{"name":"...","score":0.0}],'
        '"safeSearch":{"adult":"...","violence":"...","racy":"..."},'
        '"dominantColors":["#rrggbb"]}'
    )

def analytics_prompt(metrics: Dict[str, Any], period: str) -> str:
    return (
        "Analyze this artisan's performance data and provide insights:\n"
        f"- Total Sales: {metrics.get('sales', 0)}\n"
        f"- Total Revenue: {metrics.get('revenue', 0)}\n"
        f"- Total Product Views: {metrics.get('views', 0)}\n"
        f"- Number of Products: {metrics.get('products', 0)}\n"
        f"- Period: {period}\n\n"
        "Provide:\n"
        "1. Performance insights\n"
        "2. Predicted next period sales (number)\n"
        "3. Trend direction (up/down/stable)\n"
        "4. Confidence level (0-100)\n"
        "5. Recommendations for improvement"
    )

import logging
from typing import Any, Dict, Optional

from artisan_hub.domain.models.catalog import Artisan, Product, to_wire
from artisan_hub.domain.models.content import GenerationResult
from artisan_hub.domain.services.constants import CONTENT_LISTING, CONTENT_MARKETING_PACKAGE
from artisan_hub.domain.services.content_svc import generate_structured
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.prompts import listing_description_prompt, marketing_package_prompt

logger = logging.getLogger(__name__)


async def generate_listing_description(llm: LLMService, *, basic_info: Optional[Dict[str, Any]]) -> GenerationResult:
    return await generate_structured(
        llm,
        content_type=CONTENT_LISTING,
        prompt=listing_description_prompt(basic_info),
    )


async def generate_marketing_package(
    llm: LLMService,
    *,
    product: Product,
    artisan: Optional[Artisan] = None,
) -> GenerationResult:
    prompt = marketing_package_prompt(to_wire(product), to_wire(artisan) if artisan else None)
    return await generate_structured(llm, content_type=CONTENT_MARKETING_PACKAGE, prompt=prompt)

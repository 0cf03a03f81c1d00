"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in RequesterFactory.
"""

import json
from typing import ClassVar

from rosterscan.extraction.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that returns a fixed two-row roster.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[list[dict[str, object]]] = [
        {
            "序号": 1,
            "平台": "TikTok",
            "昵称": "Example Creator",
            "链接": "https://www.tiktok.com/@examplecreator",
            "账号类型": "时尚",
            "粉丝数（W）": "12.5",
            "国家/地区": "美国",
        },
        {
            "序号": 2,
            "平台": "Instagram",
            "昵称": "Sample Studio",
            "链接": "https://www.instagram.com/samplestudio",
            "账号类型": "美妆",
            "粉丝数（W）": "0.8",
            "国家/地区": "",
        },
    ]

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_data: bytes,
        mime_type: str,
    ) -> str | None:
        _ = model, temperature, prompt, image_data, mime_type
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)

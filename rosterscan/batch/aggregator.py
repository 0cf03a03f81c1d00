"""Concurrent per-image extraction with an ordered, re-indexed merge."""

import asyncio
from collections.abc import Sequence

from rosterscan.batch.exceptions import CapacityExceededError
from rosterscan.extraction.base import BaseRequester
from rosterscan.extraction.exceptions import ExtractionNetworkError
from rosterscan.extraction.models import Dataset, ExtractedRow, ExtractionResult, ImagePayload
from rosterscan.extraction.schema import INDEX_FIELD
from rosterscan.logging.logger import Log

DEFAULT_MAX_BATCH_IMAGES = 5


class BatchAggregator:
    """Runs one extraction per image concurrently and merges the results.

    Results are merged in submission order, not completion order. Any single
    failure fails the whole batch; the error reported is the first one in
    submission order.
    """

    def __init__(
        self,
        requester: BaseRequester,
        *,
        max_batch_images: int = DEFAULT_MAX_BATCH_IMAGES,
        max_image_attempts: int = 1,
        index_field: str = INDEX_FIELD,
    ) -> None:
        self._requester = requester
        self._max_batch_images = max_batch_images
        self._max_image_attempts = max(1, max_image_attempts)
        self._index_field = index_field

    async def run(self, images: Sequence[ImagePayload]) -> Dataset:
        """Extract and merge rows for all images.

        Raises:
            CapacityExceededError: if more than max_batch_images are given.
            ExtractionError: the first per-image failure in submission order.
        """
        self.check_capacity(len(images))
        if not images:
            return Dataset.empty()

        Log.info(f"Processing batch of {len(images)} image(s)")
        results = await asyncio.gather(
            *(self._extract_one(image) for image in images),
            return_exceptions=True,
        )

        collected: list[ExtractionResult] = []
        for image, result in zip(images, results):
            if isinstance(result, BaseException):
                Log.error(f"Batch failed on image '{image.name}': {result}")
                raise result
            collected.append(result)

        dataset = merge_results(collected, index_field=self._index_field)
        Log.info(f"Batch complete: {len(dataset.rows)} rows from {len(images)} image(s)")
        return dataset

    def check_capacity(self, count: int) -> None:
        if count > self._max_batch_images:
            raise CapacityExceededError(self._max_batch_images, count)

    async def _extract_one(self, image: ImagePayload) -> ExtractionResult:
        attempt = 1
        while True:
            try:
                return await self._requester.extract(image)
            except ExtractionNetworkError as exc:
                if attempt >= self._max_image_attempts:
                    raise
                Log.warning(
                    f"Extraction of '{image.name}' failed (attempt {attempt}), retrying: {exc}"
                )
                attempt += 1


def merge_results(
    results: Sequence[ExtractionResult],
    index_field: str = INDEX_FIELD,
) -> Dataset:
    """Concatenate per-image rows in order and rewrite the index from 1.

    Headers come from the first result that reports any.
    """
    headers: list[str] = []
    rows: list[ExtractedRow] = []
    for result in results:
        if not headers and result.headers:
            headers = list(result.headers)
        rows.extend(result.rows)

    reindexed = [{**row, index_field: position} for position, row in enumerate(rows, start=1)]
    return Dataset(rows=reindexed, headers=headers)

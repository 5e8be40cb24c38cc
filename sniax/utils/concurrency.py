"""Concurrency utilities for SNIAX."""

import logging
from typing import List, Callable, TypeVar, Generic, Any, Optional
import concurrent.futures

T = TypeVar('T')


class ConcurrentExecutor(Generic[T]):
    """Bounded thread-pool executor for blocking network work.

    Every call opens its own pool, so an executor used inside a task running
    on another executor never competes with its caller for workers.
    """

    def __init__(self, max_workers: int = 10):
        """Initialize concurrent executor.

        Args:
            max_workers: Maximum number of concurrent workers
        """
        self.max_workers = max_workers
        self.logger = logging.getLogger('sniax.concurrent_executor')

    def _pool_size(self, items: List[Any]) -> int:
        return max(1, min(self.max_workers, len(items)))

    def execute(self, func: Callable[..., T], items: List[Any],
                on_result: Optional[Callable[[Any, T], None]] = None,
                on_error: Optional[Callable[[Any, Exception], None]] = None) -> List[T]:
        """Execute a function concurrently on multiple items.

        Results are collected in completion order. A failing item is logged
        (or passed to on_error) and never affects the other items.

        Args:
            func: Function to execute
            items: List of items to process
            on_result: Optional callback invoked with (item, result) as each completes
            on_error: Optional callback invoked with (item, exception) on failure

        Returns:
            List of results from the items that succeeded
        """
        results = []
        if not items:
            return results

        with concurrent.futures.ThreadPoolExecutor(max_workers=self._pool_size(items)) as executor:
            future_to_item = {executor.submit(func, item): item for item in items}

            for future in concurrent.futures.as_completed(future_to_item):
                item = future_to_item[future]
                try:
                    result = future.result()
                except Exception as e:
                    if on_error:
                        on_error(item, e)
                    else:
                        self.logger.error(f"Error processing {item}: {e}")
                    continue

                results.append(result)
                if on_result:
                    on_result(item, result)

        return results

    def execute_ordered(self, func: Callable[..., T], items: List[Any]) -> List[T]:
        """Execute a function concurrently and return results in input order.

        Args:
            func: Function to execute; must handle its own expected failures
            items: List of items to process

        Returns:
            List of results aligned with items
        """
        if not items:
            return []

        with concurrent.futures.ThreadPoolExecutor(max_workers=self._pool_size(items)) as executor:
            return list(executor.map(func, items))

"""Thread Safety Example - Sharing one I18n instance between threads.

Thread Safety:
    Lookups are safe from any number of threads. store_translations() and
    reload() take the store's write lock, so a lookup racing a merge sees
    either the old or the new tree, never a half-merged one. The current
    locale is bound per thread (and per asyncio task) with locale_scope().

Demonstrates:
1. Load at startup, then share for reads (recommended)
2. Per-thread ambient locales
3. Merging translations while readers are running

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from i18ntree import DictLoader, I18n

TRANSLATIONS = {
    "en": {"greeting": "Hello, {{name}}!"},
    "de": {"greeting": "Hallo, {{name}}!"},
    "fr": {"greeting": "Bonjour, {{name}}!"},
}


def example_1_shared_reads() -> None:
    """Example 1: Load once, read from many threads."""
    print("=" * 60)
    print("Example 1: Shared Reads")
    print("=" * 60)

    i18n = I18n(loaders=[DictLoader(TRANSLATIONS)])

    def worker(thread_id: int) -> str:
        return i18n.t("greeting", name=f"Thread-{thread_id}")

    with ThreadPoolExecutor(max_workers=4) as pool:
        for result in pool.map(worker, range(4)):
            print(f"  {result}")


def example_2_ambient_locale_per_thread() -> None:
    """Example 2: Each request thread binds its own locale."""
    print("\n" + "=" * 60)
    print("Example 2: Per-thread Locale")
    print("=" * 60)

    i18n = I18n(loaders=[DictLoader(TRANSLATIONS)])

    def handle_request(locale: str) -> str:
        with i18n.locale_scope(locale):
            return f"[{locale}] {i18n.t('greeting', name='World')}"

    with ThreadPoolExecutor(max_workers=3) as pool:
        for result in pool.map(handle_request, ["en", "de", "fr"]):
            print(f"  {result}")


def example_3_merge_while_reading() -> None:
    """Example 3: Hot-adding translations while readers run."""
    print("\n" + "=" * 60)
    print("Example 3: Merge While Reading")
    print("=" * 60)

    i18n = I18n(loaders=[DictLoader(TRANSLATIONS)])
    stop = threading.Event()
    seen: set[str] = set()

    def reader() -> None:
        while not stop.is_set():
            seen.add(i18n.t("farewell", default="(not loaded yet)"))

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    i18n.store_translations("en", {"farewell": "Goodbye!"})
    stop.set()
    for thread in threads:
        thread.join()

    print(f"  Readers observed: {sorted(seen)}")


if __name__ == "__main__":
    example_1_shared_reads()
    example_2_ambient_locale_per_thread()
    example_3_merge_while_reading()

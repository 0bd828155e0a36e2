"""asyncio: coroutines, gather, timeouts, tasks, async generators and queues."""
from __future__ import annotations

import asyncio
import time


async def fetch_user_data(user_id: int) -> str:
    await asyncio.sleep(0.2)
    if user_id <= 0:
        raise ValueError("Invalid user ID")
    return f"User {user_id} data fetched"


async def process_order(order_id: int) -> str:
    await asyncio.sleep(0.1)
    return f"Order {order_id} validated"


async def charge_payment(order_id: int) -> str:
    await asyncio.sleep(0.1)
    return f"Payment for order {order_id} processed"


async def ship_order(order_id: int) -> str:
    await asyncio.sleep(0.1)
    return f"Order {order_id} shipped"


async def get_user_profile(user_id: int) -> str:
    try:
        data = await fetch_user_data(user_id)
        return f"Profile: {data}"
    except ValueError as e:
        return f"Error: {e}"


async def countdown(n: int):
    while n > 0:
        yield n
        await asyncio.sleep(0.05)
        n -= 1


async def producer(queue: asyncio.Queue, items: list[str]) -> None:
    for item in items:
        await queue.put(item)
    await queue.put(None)


async def consumer(queue: asyncio.Queue) -> list[str]:
    seen = []
    while (item := await queue.get()) is not None:
        seen.append(item.upper())
    return seen


async def main() -> None:
    print("=== Sequential awaits ===")
    for step in (process_order, charge_payment, ship_order):
        print(await step(1001))

    print("\n=== try/except around await ===")
    print(await get_user_profile(1))
    print(await get_user_profile(-1))

    print("\n=== gather (concurrent) ===")
    started = time.perf_counter()
    results = await asyncio.gather(*(fetch_user_data(i) for i in (1, 2, 3)))
    elapsed = time.perf_counter() - started
    for r in results:
        print(r)
    print(f"Three fetches took ~{elapsed:.1f}s, not ~0.6s")

    print("\n=== gather with return_exceptions ===")
    mixed = await asyncio.gather(fetch_user_data(5), fetch_user_data(0), return_exceptions=True)
    for r in mixed:
        print(f"{type(r).__name__}: {r}")

    print("\n=== Timeouts ===")
    try:
        await asyncio.wait_for(asyncio.sleep(1), timeout=0.1)
    except asyncio.TimeoutError:
        print("Operation timed out after 0.1s")

    print("\n=== Tasks ===")
    task = asyncio.create_task(fetch_user_data(42))
    print(f"Task created, done={task.done()}")
    print(await task)
    print(f"Task done={task.done()}")

    print("\n=== Async generators ===")
    print(f"Countdown: {[n async for n in countdown(3)]}")

    print("\n=== Queues ===")
    queue: asyncio.Queue = asyncio.Queue()
    _, consumed = await asyncio.gather(producer(queue, ["a", "b", "c"]), consumer(queue))
    print(f"Consumed: {consumed}")


if __name__ == "__main__":
    asyncio.run(main())

"""Async example of creating temporary paths with temppath."""

import asyncio
import shutil

from temppath import acreate_temp_path, create_temp_path


async def main() -> None:
    """Run async examples."""
    # Example 1: Coroutine form
    print("Example 1: Coroutine")
    print("-" * 50)
    directory = await acreate_temp_path()
    print(f"Created: {directory}\n")

    # Example 2: Concurrent file creation
    print("Example 2: Concurrent Files")
    print("-" * 50)
    filenames = await asyncio.gather(
        *(acreate_temp_path(directory, {"as_file": True, "extension": "log"}) for _ in range(3))
    )
    for filename in filenames:
        print(f"Created: {filename}")

    # Example 3: Callback form
    print("\nExample 3: Callback")
    print("-" * 50)
    done = asyncio.get_running_loop().create_future()

    def on_created(err, path):
        if err is not None:
            print(f"Failed: {err}")
        else:
            print(f"Created: {path}")
        done.set_result(path)

    create_temp_path(directory, on_created)
    await done

    shutil.rmtree(directory)


if __name__ == "__main__":
    asyncio.run(main())

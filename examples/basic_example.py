"""Basic example of creating temporary paths with temppath."""

import shutil

from temppath import CreationFailedError, create_temp_path_sync, get_temp_path


def main():
    """Run basic examples."""
    # Example 1: Generate a path without creating anything
    print("Example 1: Path Only")
    print("-" * 50)
    print(f"Path: {get_temp_path()}")
    print(f"Short name: {get_temp_path(max_len=8)}\n")

    # Example 2: Create a temporary directory
    print("Example 2: Temporary Directory")
    print("-" * 50)
    directory = create_temp_path_sync()
    print(f"Created: {directory}\n")

    # Example 3: Create empty files inside it
    print("Example 3: Temporary Files")
    print("-" * 50)
    for extension in ("json", ".csv", ""):
        filename = create_temp_path_sync(
            directory, {"as_file": True, "extension": extension, "max_name_length": 12}
        )
        print(f"Created: {filename}")

    # Example 4: Error handling
    print("\nExample 4: Error Handling")
    print("-" * 50)
    try:
        create_temp_path_sync(f"{filename}/nested")
    except CreationFailedError as e:
        print(f"Could not create {e.kind}: {e.cause}")

    shutil.rmtree(directory)


if __name__ == "__main__":
    main()

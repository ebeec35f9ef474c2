from typing import Any, Dict


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge source into a copy of target.

    Nested dicts are merged recursively; lists and scalars from source
    replace the target's value.
    """
    output = dict(target)
    for key, source_value in source.items():
        if isinstance(source_value, dict):
            target_value = output.get(key)
            output[key] = deep_merge(
                target_value if isinstance(target_value, dict) else {},
                source_value,
            )
        else:
            output[key] = source_value
    return output

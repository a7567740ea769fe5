#!/usr/bin/env python3
"""Validate car YAML files against the schema."""
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError

from pricing import check_purchase_value


def load_schema() -> dict:
    """Load the JSON schema from pricing/schema.yaml."""
    schema_path = Path(__file__).parent / "pricing" / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def validate_car_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single car YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        # NaN passes JSON Schema number bounds
        check_purchase_value(Decimal(str(data["purchaseValue"])))
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except (ValueError, InvalidOperation) as e:
        errors.append(f"Value error: {e}")
        errors.append("  at path: purchaseValue")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate each car YAML file named on the command line."""
    paths = [Path(p) for p in (sys.argv[1:] if argv is None else argv)]
    if not paths:
        print("Usage: validate_yaml.py CAR_FILE [CAR_FILE ...]")
        return 1

    schema = load_schema()
    all_valid = True
    for filepath in paths:
        errors = validate_car_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())

from tsdecl.api.extractors import get_structs, get_exported_structs
from tsdecl.lib.tags import JSON_TAG_KEY, lookup_tag, parse_json_tag


def print_model_debug(model):
    structs = get_structs(model)
    exported = get_exported_structs(model)
    exported_names = {s.name for s in exported}

    print("=== SUMMARY ===")
    print(f"Package: {getattr(model, 'package', '?')}")
    print(f"Structs: {len(structs)} | Exported: {len(exported)}\n")

    if structs:
        print("=== STRUCTS ===")
        for s in structs:
            marker = " (exported)" if s.name in exported_names else ""
            print(f"- {s.name}{marker}")

            fields = getattr(s, "fields", []) or []
            if not fields:
                print("    (no fields)")
            for f in fields:
                json_name, skip = parse_json_tag(lookup_tag(f.tag, JSON_TAG_KEY))
                bits = [f.type_spec.signature]
                if skip:
                    bits.append("skip")
                elif json_name:
                    bits.append(f"json={json_name}")
                print(f"    • {f.name}: " + " ".join(bits))
        print()

    if exported:
        print("=== EXPORT ORDER ===")
        for i, s in enumerate(exported, 1):
            print(f"{i}. {s.name}")
        print()

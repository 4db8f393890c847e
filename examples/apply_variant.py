import ezschdoc


def main() -> None:
    doc = ezschdoc.read("examples/data/power_supply.SchDoc")
    result = doc.apply_variant({"R7": {}, "C3": {"Value": "22u", "Voltage": "25V"}})
    print(f"not fitted: {result.not_fitted}")
    print(f"changed parameters: {result.changed_parameters}")
    print(f"missing designators: {result.missing_designators}")

    for parameter in doc.query("Parameter"):
        if parameter.changed:
            print("changed:", parameter.name, parameter.text)


if __name__ == "__main__":
    main()

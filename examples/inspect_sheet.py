import ezschdoc


doc = ezschdoc.read("examples/data/power_supply.SchDoc")
print("sheet:", doc.sheet.width, doc.sheet.height)

for component in doc.query("Component"):
    designators = [child for child in doc.children(component) if child.NAME == "Designator"]
    name = doc.full_designator(designators[0]) if designators else "?"
    print(name, component.library_reference, component.description)

for item in doc.diagnostics:
    print("diagnostic:", item)

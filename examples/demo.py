"""
loosejson demonstration script.
"""

import loosejson


def main():
    print("loosejson - Relaxed JSON Normalizer Demo")
    print("=" * 40)

    examples = [
        ("{ a: 'b' }", "Unquoted key, single-quoted value"),
        ("{ name: 'John Smith', age: 30, tags: ['x', 'y'] }", "Mixed values"),
        ("{ _id: ObjectId(\"5a1b\") }", "Bare driver literal"),
        ("{ a: { c: d } }  { a: { c: d } }", "Two documents on one line"),
        ("{ a: [1, 2 }", "Mismatched bracket"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:    {text}")

        try:
            result = loosejson.relaxed_to_strict(text)
            print(f"Output:   {result.text}")
            print(f"Consumed: {result.consumed}")
        except loosejson.LooseJSONError as e:
            print(f"Error:    {e}")

    print("\nSelector and update document from one line:")
    line = "{ name: 'x' } { $set: { visits: 2 } }"
    for document in loosejson.iter_documents(line):
        print(f"  {document}")

    print("\nHuman-readable rendering:")
    print(loosejson.human_readable('{"server":{"host":"localhost","ports":[80,443]},"debug":true}').text)


if __name__ == "__main__":
    main()

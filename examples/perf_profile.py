"""Simple profiling of entity construction and rendering."""

from __future__ import annotations

import timeit
import tracemalloc

from tscodegen import Access, TextBuffer, TSClass, TSFile, TSMethod, TSParameter, TSProperty


def _build_class(index: int, members: int) -> TSClass:
    cls = TSClass(name=f"Entity{index}", is_export=True, inherit_class_name="Base")
    for i in range(members):
        cls.add_property(TSProperty(access=Access.PRIVATE, name=f"field{i}", type="string"))
        getter = TSMethod(name=f"getField{i}", return_type="string", is_readonly=True)
        getter.append_codes(f"return this.field{i};")
        cls.add_method(getter)
    setter = TSMethod(name="update", parameters=[TSParameter("string", "value", '""')])
    setter.append_codes("this.field0 = value;")
    cls.add_method(setter)
    return cls


def _build_file(classes: int, members: int) -> TSFile:
    f = TSFile(name="bench", author="perf", version="1.0", comment="profiling")
    for c in range(classes):
        f.add_class(_build_class(c, members))
    return f


def main() -> None:
    small: TSFile = _build_file(5, 5)
    duration: float = timeit.timeit(lambda: small.write(TextBuffer()), number=1000)
    print(f"TSFile.write() 5x5: {duration:.4f}s/1000")

    big: TSFile = _build_file(200, 20)
    to_text: float = timeit.timeit(lambda: big.to_code(), number=10)
    print(f"TSFile.to_code() 200x20: {to_text:.4f}s/10")

    tracemalloc.start()
    text: str = _build_file(200, 20).to_code()
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Rendered {len(text)} chars: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()

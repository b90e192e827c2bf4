"""Minimal example converting a dataclass tree to a flat record and back."""

from dataclasses import dataclass, field

from dict_shape import flatten, hidden, label, to_canonical_map, unflatten


@dataclass
class Toy:
    prefix: str
    code: str


@dataclass
class Pet:
    kind: str
    favorite_toy: Toy = field(metadata=label("favoriteToy"))


@dataclass
class Person:
    name: str
    age: int
    pets: list[Pet]
    password: str = field(default="", metadata=hidden())


def main() -> None:
    """Run a convert/flatten/unflatten flow on a small object graph."""
    person = Person(
        name="John",
        age=28,
        pets=[
            Pet(kind="dog", favorite_toy=Toy(prefix="alt", code="BD8340F")),
            Pet(kind="cat", favorite_toy=Toy(prefix="tab", code="LS9238W")),
        ],
        password="hunter2",
    )
    tree = to_canonical_map(person)
    print("tree:", tree)

    flat = flatten(tree)
    for key, value in flat.items():
        print(f"{key} = {value!r}")

    print("restored:", unflatten(flat) == tree)


if __name__ == "__main__":
    main()

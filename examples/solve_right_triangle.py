"""Example pipeline: solve a 3-4-5 triangle and print the stat panel."""

from trisolve import AppState, recompute


def main() -> None:
    snapshot = recompute(AppState())
    triangle = snapshot.result.unwrap()
    print("Angles (deg):", ", ".join(f"{angle:.4f}" for angle in triangle.angles_degrees()))
    print("Area:", snapshot.display.area)
    print("Type:", snapshot.display.side_type, "/", snapshot.display.angle_type)
    for line in snapshot.display.steps:
        print(line)


if __name__ == "__main__":
    main()

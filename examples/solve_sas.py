"""Example: solve an SAS triangle directly through the solver API."""

from trisolve import compute_metrics, solve


def main() -> None:
    result = solve("SAS", {"a": 5, "b": 7, "angle_c": 45})
    if not result.ok:
        print("Error:", result.error.message)
        return
    triangle = result.triangle
    metrics = compute_metrics(triangle)
    print(f"c = {triangle.c:.4f}")
    print(f"inradius = {metrics.inradius:.4f}, circumradius = {metrics.circumradius:.4f}")
    for step in result.steps:
        print(f"{step.name}: {step.substitution} = {step.result_text}")


if __name__ == "__main__":
    main()

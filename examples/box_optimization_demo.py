"""
Example: minimising the catalogue test functions with boxopt

Runs every optimization method on the quartic valley
``(0.1x - y)^4 + y^2`` inside ``[-5, 5]^2`` and prints the run summaries,
then shows how configuration objects build the same pieces.
"""

import numpy as np

from boxopt import (
    AdamGradientDescent,
    ClassicGradientDescent,
    CriterionConfig,
    DifferenceNormStopCriterion,
    MethodConfig,
    RandomSearch,
    Region,
    create_criterion,
    create_method,
    format_report,
    get_function,
    run_optimization,
)


def example_methods_on_quartic_valley():
    """Example: the three methods from the same start point."""
    print("=" * 60)
    print("Example 1: Quartic valley, three methods")
    print("=" * 60)

    function = get_function("quartic_valley")
    region = Region([(-5.0, 5.0), (-5.0, 5.0)])
    start = np.array([2.0, 1.9])
    criterion = DifferenceNormStopCriterion(eps=1e-8, max_iter=1000)

    methods = [
        ClassicGradientDescent(),
        AdamGradientDescent(alpha=1.0, beta1=0.8, beta2=0.99, epsilon=1e-8),
        RandomSearch(alpha=0.9, p=0.5, delta=0.1, seed=228),
    ]
    for method in methods:
        report = run_optimization(method, function, region, start, criterion)
        print(format_report(report))


def example_from_configuration():
    """Example: building a method and a criterion from config objects."""
    print("=" * 60)
    print("Example 2: Himmelblau from configuration")
    print("=" * 60)

    function = get_function("himmelblau")
    region = Region([(-5.0, 5.0), (-5.0, 5.0)])
    method = create_method(MethodConfig(name="classic"))
    criterion = create_criterion(
        CriterionConfig(name="grad_norm", eps=1e-6, max_iter=500)
    )
    report = run_optimization(method, function, region, [1.0, 1.0], criterion)
    print(format_report(report))


if __name__ == "__main__":
    example_methods_on_quartic_valley()
    example_from_configuration()
    print("Demo finished")

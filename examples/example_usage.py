import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_algebra import (
  Constant, Variable, Add, Multiply, Divide, Power, Sine, Cosine,
  evaluate, differentiate, gradient, try_evaluate, latex_representation,
  LogLevel, configure_logging
)


def main():
  configure_logging(LogLevel.DETAILED)

  x = Variable("x")
  y = Variable("y")

  # f(x, y) = x^2 * sin(y) + cos(x) / y
  f = Add(
    Multiply(Power(x, Constant(2)), Sine(y)),
    Divide(Cosine(x), y)
  )
  print(f"f(x, y) = {f}")
  print(f"LaTeX: {latex_representation(f)}")

  print("\nPartial evaluation with x = 2:")
  print(evaluate(f, {"x": Constant(2)}))

  print("\nFull evaluation with x = 2, y = 0.5:")
  print(evaluate(f, {"x": Constant(2), "y": Constant(0.5)}))

  print("\nGradient:")
  for name, derivative in gradient(f, [x, y]).items():
    print(f"  df/d{name} = {derivative}")

  print("\nx-derivative at (1, 1):")
  print(evaluate(differentiate(f, x), {"x": Constant(1), "y": Constant(1)}))

  result = try_evaluate(f, {"y": Constant(0)})
  if not result.ok:
    print(f"\nEvaluating at y = 0 failed: {result.error}")


if __name__ == "__main__":
  main()

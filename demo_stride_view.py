"""
Demo: Build the example stride views over 1..10 and print their analysis.
"""

from strideview import algorithms, stride
from strideview.analyzer import analyze_view
from strideview.examples import build_example_sequence, build_example_views
from strideview.parser import format_pipeline, parse_pipeline
from strideview.serialization import pipeline_to_yaml


def print_report(name, view, report):
    """Pretty-print a ViewReport."""
    print(f"{name}")
    print(f"  Elements:          {list(view)}")
    print(f"  Strides:           {report.strides}")
    print(f"  Effective Stride:  {report.effective_stride}")
    print(f"  Expected Count:    {report.expected_count}")
    print(f"  Multi-pass:        {'YES' if report.multi_pass else 'NO'}")
    if report.warnings:
        for msg in report.warnings:
            print(f"  ! {msg}")
    print()


def main():
    data = build_example_sequence()

    print()
    print("=" * 70)
    print(f"STRIDE VIEWS OVER {data}")
    print("=" * 70)
    print()

    for name, view in build_example_views(data).items():
        print_report(name, view, analyze_view(view))

    print("=" * 70)
    print("WRITING THROUGH A VIEW")
    print("=" * 70)
    algorithms.for_each(data | stride(2), lambda x: x * 10)
    print(f"  After x10 on every 2nd element: {data}")
    print()

    print("=" * 70)
    print("PIPELINE CONFIGURATION")
    print("=" * 70)
    pipeline = parse_pipeline("stride(2) | stride(2)")
    print(f"  Text:  {format_pipeline(pipeline)}")
    print("  YAML:")
    for line in pipeline_to_yaml(pipeline).splitlines():
        print(f"    {line}")
    print(f"  Applied to 1..10: {list(build_example_sequence() | pipeline)}")
    print()


if __name__ == "__main__":
    main()

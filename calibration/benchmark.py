"""
Benchmark Runner — Detection Accuracy per Category

Runs the calibration corpus through the analyzer and compares its output
against human labels. Produces:

  1. Document-level has_pork confusion matrix, precision, recall, F1
  2. Per-category precision/recall/F1 for the item categories
  3. Confidence separation between clean and pork samples
  4. Specific misses and false alarms for manual review
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from porkscan.analyzer import PorkAnalyzer, pork_analyzer
from calibration.corpus_parser import (
    CATEGORY_TO_TAG,
    TAG_TO_CATEGORY,
    parse_all_corpora,
)


@dataclass
class CategoryMetrics:
    """Precision/recall counts for one item category (or the document verdict)."""
    name: str
    true_positives: int = 0
    false_positives: int = 0
    false_negatives: int = 0
    true_negatives: int = 0

    @property
    def precision(self) -> float:
        denom = self.true_positives + self.false_positives
        return self.true_positives / denom if denom > 0 else 0.0

    @property
    def recall(self) -> float:
        denom = self.true_positives + self.false_negatives
        return self.true_positives / denom if denom > 0 else 0.0

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return 2 * p * r / (p + r) if (p + r) > 0 else 0.0

    @property
    def support(self) -> int:
        return self.true_positives + self.false_negatives

    def record(self, engine_has: bool, human_has: bool) -> None:
        if engine_has and human_has:
            self.true_positives += 1
        elif engine_has:
            self.false_positives += 1
        elif human_has:
            self.false_negatives += 1
        else:
            self.true_negatives += 1


@dataclass
class BenchmarkResult:
    """Full benchmark output."""
    total_samples: int
    clean_samples: int
    pork_samples: int
    detection: CategoryMetrics
    category_metrics: dict[str, CategoryMetrics]
    accuracy: float
    avg_confidence_clean: float
    avg_confidence_pork: float
    confidence_separation: float
    false_positives: list[dict]
    false_negatives: list[dict]


def run_benchmark(
    corpus_dir: str | Path = "calibration/corpus",
    analyzer: Optional[PorkAnalyzer] = None,
) -> BenchmarkResult:
    """
    Run the full calibration benchmark.

    Raises:
        ValueError: if the corpus directory holds no samples.
    """
    analyzer = analyzer or pork_analyzer
    samples = parse_all_corpora(corpus_dir)
    if not samples:
        raise ValueError(f"No samples found in {corpus_dir}")

    detection = CategoryMetrics(name="has_pork")
    metrics = {cat: CategoryMetrics(name=tag) for tag, cat in TAG_TO_CATEGORY.items()}
    false_positives = []
    false_negatives = []
    clean_conf = []
    pork_conf = []

    for sample in samples:
        result = analyzer.analyze_text(sample.text)
        engine_categories = {item.category for item in result.pork_items}
        human_categories = sample.expected_categories

        sample.engine_result = {
            "has_pork": result.has_pork,
            "confidence_score": result.confidence_score,
            "categories": sorted(engine_categories),
            "total_pork_value": result.total_pork_value,
        }

        detection.record(result.has_pork, not sample.is_clean)
        if result.has_pork and sample.is_clean:
            false_positives.append({
                "text": sample.text[:200],
                "source": sample.source,
                "categories": sorted(engine_categories),
                "indicator_count": result.indicator_count,
            })
        elif not result.has_pork and not sample.is_clean:
            false_negatives.append({
                "text": sample.text[:200],
                "source": sample.source,
                "human_tags": sample.tags,
                "notes": sample.notes,
            })

        for category, cm in metrics.items():
            cm.record(category in engine_categories, category in human_categories)

        (clean_conf if sample.is_clean else pork_conf).append(result.confidence_score)

    total_decisions = sum(
        m.true_positives + m.false_positives + m.false_negatives + m.true_negatives
        for m in metrics.values()
    )
    total_correct = sum(m.true_positives + m.true_negatives for m in metrics.values())

    avg_clean = sum(clean_conf) / len(clean_conf) if clean_conf else 0.0
    avg_pork = sum(pork_conf) / len(pork_conf) if pork_conf else 0.0
    clean_count = sum(1 for s in samples if s.is_clean)

    return BenchmarkResult(
        total_samples=len(samples),
        clean_samples=clean_count,
        pork_samples=len(samples) - clean_count,
        detection=detection,
        category_metrics=metrics,
        accuracy=round(total_correct / total_decisions, 4) if total_decisions else 0.0,
        avg_confidence_clean=round(avg_clean, 1),
        avg_confidence_pork=round(avg_pork, 1),
        confidence_separation=round(avg_pork - avg_clean, 1),
        false_positives=false_positives,
        false_negatives=false_negatives,
    )


def format_report(result: BenchmarkResult) -> str:
    """Format benchmark results as a human-readable report."""
    d = result.detection
    lines = [
        "=" * 60,
        "PORKSCAN CALIBRATION REPORT",
        "=" * 60,
        "",
        f"Samples: {result.total_samples} "
        f"({result.clean_samples} clean, {result.pork_samples} pork)",
        "",
        "--- DOCUMENT DETECTION ---",
        f"Precision: {d.precision:.1%}",
        f"Recall:    {d.recall:.1%}",
        f"F1 Score:  {d.f1:.1%}",
        f"TP={d.true_positives} FP={d.false_positives} "
        f"FN={d.false_negatives} TN={d.true_negatives}",
        "",
        "--- CONFIDENCE ANALYSIS ---",
        f"Avg confidence (clean samples): {result.avg_confidence_clean}",
        f"Avg confidence (pork samples):  {result.avg_confidence_pork}",
        f"Separation gap:                 {result.confidence_separation}",
        "",
        f"--- PER-CATEGORY BREAKDOWN (accuracy {result.accuracy:.1%}) ---",
        f"{'Category':<25} {'Prec':>6} {'Recall':>6} {'F1':>6} {'TP':>4} {'FP':>4} {'FN':>4}",
        "-" * 62,
    ]

    for category, m in sorted(
        result.category_metrics.items(), key=lambda kv: (-kv[1].support, -kv[1].f1),
    ):
        if m.support > 0 or m.false_positives > 0:
            lines.append(
                f"{CATEGORY_TO_TAG.get(category, category):<25} {m.precision:>5.0%} "
                f"{m.recall:>6.0%} {m.f1:>5.0%} {m.true_positives:>4} "
                f"{m.false_positives:>4} {m.false_negatives:>4}"
            )

    if result.false_negatives:
        lines.extend(["", "--- MISSES (pork the engine did not flag) ---"])
        for fn in result.false_negatives[:10]:
            lines.append(f"  [{', '.join(fn['human_tags'])}] {fn['text'][:80]}...")
            if fn.get("notes"):
                lines.append(f"    Notes: {fn['notes']}")

    if result.false_positives:
        lines.extend(["", "--- FALSE ALARMS (clean text flagged) ---"])
        for fp in result.false_positives[:10]:
            lines.append(f"  [{fp['indicator_count']} indicators] {fp['text'][:80]}...")

    lines.extend(["", "=" * 60])
    return "\n".join(lines)


def save_report(result: BenchmarkResult, output_dir: str | Path = "calibration/reports"):
    """Save benchmark results as both human-readable report and JSON."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / "calibration_report.txt"
    report_path.write_text(format_report(result), encoding="utf-8")

    d = result.detection
    json_data = {
        "total_samples": result.total_samples,
        "clean_samples": result.clean_samples,
        "pork_samples": result.pork_samples,
        "detection": {
            "precision": d.precision,
            "recall": d.recall,
            "f1": d.f1,
            "tp": d.true_positives,
            "fp": d.false_positives,
            "fn": d.false_negatives,
            "tn": d.true_negatives,
        },
        "accuracy": result.accuracy,
        "confidence": {
            "avg_clean": result.avg_confidence_clean,
            "avg_pork": result.avg_confidence_pork,
            "separation": result.confidence_separation,
        },
        "per_category": {
            category: {
                "precision": m.precision,
                "recall": m.recall,
                "f1": m.f1,
                "tp": m.true_positives,
                "fp": m.false_positives,
                "fn": m.false_negatives,
                "support": m.support,
            }
            for category, m in result.category_metrics.items()
            if m.support > 0 or m.false_positives > 0
        },
        "false_positives": result.false_positives,
        "false_negatives": result.false_negatives,
    }
    json_path = output_dir / "calibration_report.json"
    json_path.write_text(json.dumps(json_data, indent=2), encoding="utf-8")

    return report_path, json_path

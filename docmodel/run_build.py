"""Orchestration of a documentation model build."""

import logging
from pathlib import Path

from docmodel.assembly_loader import AssemblyLoader
from docmodel.assembly_reader import AssemblyReader
from docmodel.build_config import BuildConfig
from docmodel.build_report import BuildReport
from docmodel.diagnostics import Diagnostics
from docmodel.documentation_matcher import DocumentationMatcher
from docmodel.documentation_model import DocumentationModel
from docmodel.errors import ConfigurationError
from docmodel.inheritance_resolver import InheritedDocResolver
from docmodel.load_topics import load_topics
from docmodel.member_registry import MemberRegistry
from docmodel.model_builder import ModelBuilder
from docmodel.source_reconciler import SourceReconciler

logger = logging.getLogger(__name__)


def build_model(
    config: BuildConfig,
    diagnostics: Diagnostics | None = None,
    *,
    reader: AssemblyReader | None = None,
    matcher: DocumentationMatcher | None = None,
    report: BuildReport | None = None,
) -> DocumentationModel | None:
    """Run the pipeline: load, reconcile, build the graph, resolve inheritance.

    Returns None when a fatal problem was found while loading or reconciling;
    every such problem has been reported to ``diagnostics`` by then.
    """
    diagnostics = diagnostics or Diagnostics()

    loader = AssemblyLoader.for_config(config, diagnostics, reader)
    loaded = loader.load(config)

    sources = SourceReconciler(diagnostics, matcher).reconcile(loaded)
    if diagnostics.has_fatal:
        logger.error("Aborting: documentation sources could not be reconciled")
        return None

    registry = MemberRegistry(diagnostics)
    builder = ModelBuilder(registry, diagnostics)
    builder.build(sources)

    topics = load_topics(config.topics, config.base_dir, diagnostics)
    for topic in topics:
        registry.register_topic(topic)

    resolver = InheritedDocResolver(registry, diagnostics)
    resolver.resolve_all()

    model = DocumentationModel(
        registry=registry, diagnostics=diagnostics, sources=sources, topics=topics
    )
    if report is not None:
        report.model = model
        report.builder = builder
        report.resolver = resolver

    logger.info(
        "Built model: %d namespaces, %d identifiers, %d inherited documentation",
        len(registry.namespaces),
        len(registry),
        len(resolver.resolved),
    )
    return model


def run_build(
    config_path: str | Path,
    *,
    report_path: str | Path | None = None,
    reader: AssemblyReader | None = None,
) -> int:
    """Build the model for a configuration file. Returns the process exit code."""
    diagnostics = Diagnostics()
    try:
        config = BuildConfig.load(config_path)
    except ConfigurationError as exc:
        diagnostics.fatal("configuration", "%s", exc)
        return 1

    report = BuildReport(config.fingerprint())
    model = build_model(config, diagnostics, reader=reader, report=report)

    if report_path is not None:
        report.generate_report(report_path, diagnostics)
        logger.info("Build report written to %s", report_path)

    if model is None or diagnostics.has_fatal:
        return 1
    return 0

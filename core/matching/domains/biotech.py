#!/usr/bin/env python3
"""Biotech taxonomy: modality, clinical phase and therapeutic area."""

from types import MappingProxyType

from core.matching.classifier import DomainTag
from core.matching.domains.weighted import CategoryWeights, DomainTaxonomy, WeightedDomainScorer

BIOTECH_TAXONOMY = DomainTaxonomy(
    technology_label="Science",
    technologies=MappingProxyType({
        "gene_therapy": ("gene therapy", "gene editing", "crispr", "aav"),
        "cell_therapy": ("cell therapy", "car-t", "stem cell"),
        "small_molecule": ("small molecule", "drug discovery", "medicinal chemistry"),
        "biologics": ("biologics", "antibody", "antibodies", "protein therapeutic"),
        "rna": ("mrna", "rna", "sirna", "antisense"),
        "platform": ("computational biology", "synthetic biology", "ai drug discovery"),
    }),
    stage_ladder=(
        ("discovery", ("discovery", "target identification", "lead optimization")),
        ("preclinical", ("preclinical", "ind-enabling", "animal studies")),
        ("phase_1", ("phase 1", "phase i trial", "first-in-human")),
        ("phase_2", ("phase 2", "phase ii", "proof of concept")),
        ("phase_3", ("phase 3", "phase iii", "pivotal")),
        ("commercial", ("fda approved", "approved drug", "commercial stage", "marketed")),
    ),
    markets=MappingProxyType({
        "oncology": ("oncology", "cancer", "tumor"),
        "rare_disease": ("rare disease", "orphan"),
        "neurology": ("neurology", "cns", "neuroscience", "neurodegenerative"),
        "immunology": ("immunology", "autoimmune", "inflammation"),
        "infectious_disease": ("infectious disease", "vaccine", "antiviral", "antibiotic"),
        "cardiometabolic": ("cardiovascular", "metabolic", "obesity", "diabetes"),
    }),
    investor_types=MappingProxyType({
        "VC": 90, "CVC": 90, "Growth Equity": 75, "Hedge Fund": 70,
        "Family Office": 70, "Accelerator": 60, "Angel": 55, "PE": 50,
    }),
    structures=("co-development", "licensing", "milestone", "royalty", "partnership"),
    weights=CategoryWeights(
        technology=0.30, stage=0.25, market=0.15, check_size=0.15, investor_type=0.10, deal_structure=0.05,
    ),
    min_check_size_overlap=0.25,
)


class BiotechDomainScorer(WeightedDomainScorer):
    domain = DomainTag.BIOTECH
    taxonomy = BIOTECH_TAXONOMY
    mismatch_score = 25.0
    mismatch_multiplier = 0.5

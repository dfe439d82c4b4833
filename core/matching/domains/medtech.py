#!/usr/bin/env python3
"""Medtech taxonomy: device category, regulatory pathway and clinical setting."""

from types import MappingProxyType

from core.matching.classifier import DomainTag
from core.matching.domains.weighted import CategoryWeights, DomainTaxonomy, WeightedDomainScorer

MEDTECH_TAXONOMY = DomainTaxonomy(
    technology_label="Technology",
    technologies=MappingProxyType({
        "diagnostics": ("diagnostic", "diagnostics", "assay", "point-of-care"),
        "surgical": ("surgical", "robotic surgery", "minimally invasive"),
        "implants": ("implant", "implantable", "orthopedic"),
        "monitoring": ("wearable", "remote monitoring", "sensor"),
        "imaging": ("imaging", "ultrasound", "mri", "radiology"),
        "software": ("software as a medical device", "samd", "ai diagnostics"),
    }),
    # Regulatory ladder
    stage_ladder=(
        ("concept", ("concept", "prototype")),
        ("bench", ("bench testing", "design freeze", "preclinical")),
        ("clinical", ("clinical study", "clinical trial", "pilot study")),
        ("submission", ("510(k)", "fda submission", "de novo", "pma", "ce mark submission")),
        ("cleared", ("fda cleared", "fda approved", "ce marked", "cleared")),
        ("commercial", ("commercial", "hospital customers", "reimbursed")),
    ),
    markets=MappingProxyType({
        "cardiology": ("cardiology", "cardiac", "cardiovascular"),
        "orthopedics": ("orthopedics", "orthopedic", "spine"),
        "neurology": ("neurology", "neuro", "stroke"),
        "hospital": ("hospital", "acute care", "operating room"),
        "home_care": ("home care", "remote patient", "consumer health"),
        "dental": ("dental", "dentistry"),
    }),
    investor_types=MappingProxyType({
        "CVC": 95, "VC": 90, "Growth Equity": 75, "Family Office": 70,
        "PE": 60, "Accelerator": 60, "Angel": 55,
    }),
    structures=("strategic partnership", "distribution agreement", "licensing", "milestone", "reimbursement"),
    weights=CategoryWeights(
        technology=0.25, stage=0.25, market=0.20, check_size=0.15, investor_type=0.10, deal_structure=0.05,
    ),
    min_check_size_overlap=0.20,
)


class MedtechDomainScorer(WeightedDomainScorer):
    domain = DomainTag.MEDTECH
    taxonomy = MEDTECH_TAXONOMY
    mismatch_score = 25.0
    mismatch_multiplier = 0.5

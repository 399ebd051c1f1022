"""Canned hydrogen-rich water (HRW) answers, keyed by classifier topic."""

from __future__ import annotations

from agriquant.models.enums import TopicEnum

FALLBACK_ANSWER = (
	"I can help with: HRW basics, application methods, timing, concentrations, equipment, "
	"costs, safety, crops, benefits, and more. What would you like to know?"
)

KNOWLEDGE_BASE: dict[TopicEnum, str] = {
	TopicEnum.what_is_hrw: (
		"HRW (Hydrogen-Rich Water) is water infused with molecular hydrogen (H2). It acts as a "
		"selective antioxidant in plants, with H2 concentrations between 0.8-1.6 ppm."
	),
	TopicEnum.mechanism: (
		"HRW works by: 1) Acting as antioxidant 2) Regulating gene expression 3) Enhancing "
		"photosynthesis 4) Improving water uptake 5) Activating plant defense systems."
	),
	TopicEnum.benefits: (
		"Benefits: Enhanced germination (15-30%), stronger roots, stress tolerance, higher yields "
		"(20-25%), better disease resistance, improved nutrient uptake."
	),
	TopicEnum.application: (
		"Apply via: 1) Foliar spraying (early morning/late afternoon) 2) Seed soaking (12-24 hrs) "
		"3) Root irrigation 4) Hydroponics. Frequency: every 2-7 days."
	),
	TopicEnum.concentration: (
		"Optimal H2: Rice 1.0-1.5 ppm, Wheat 0.8-1.2 ppm, Vegetables 0.8-1.0 ppm. Higher isn't "
		"always better."
	),
	TopicEnum.timing: (
		"Best times: Early morning (5-8 AM) or late afternoon (4-6 PM). Apply during critical "
		"stages: germination, transplanting, flowering, fruiting."
	),
	TopicEnum.equipment: (
		"Need: H2 generator, dissolving system, storage tank, spray equipment, H2 meter. Use "
		"within 24 hours."
	),
	TopicEnum.crops: (
		"Best: Rice (excellent), Wheat, Tomato, Cucumber, Lettuce, Strawberry, Soybean. "
		"Limited: Potato, Corn."
	),
	TopicEnum.cost: (
		"Investment: Small farm $500-$2000, Medium $2000-$8000, Large $8000-$25000. ROI within "
		"1-2 seasons."
	),
	TopicEnum.safety: (
		"Completely safe: Non-toxic, no residues, no soil contamination, environmentally "
		"friendly. H2 gas is flammable during generation."
	),
	TopicEnum.storage: (
		"Use within 24 hours. Store sealed, away from sunlight, 15-25°C. H2 half-life: 2-4 hours "
		"in open containers."
	),
	TopicEnum.science: (
		"150+ research papers since 2010. H2 reduces oxidative stress 40-60%, increases enzyme "
		"activity, improves photosystem efficiency 15-25%."
	),
	TopicEnum.fertilizer: (
		"HRW is NOT a fertilizer - it's a growth enhancer. Use alongside regular fertilization. "
		"May reduce fertilizer needs by 10-15%."
	),
	TopicEnum.drought: (
		"Improves drought tolerance by: reducing water loss, enhancing root depth 30-40%, "
		"maintaining photosynthesis. Apply 2-3 days before stress."
	),
	TopicEnum.organic: (
		"Perfect for organic farming: no synthetic chemicals, no residues, natural approach. "
		"Check local organic certification."
	),
}


def lookup_answer(topic: TopicEnum) -> str:
	"""Return the answer for ``topic``; the fallback topic has no KB entry."""
	return KNOWLEDGE_BASE.get(topic, FALLBACK_ANSWER)

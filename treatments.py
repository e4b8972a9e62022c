# treatments.py
# Therapy suggestions per modifiable factor (shown when the factor is elevated).

TREATMENTS = {
    "fastGlu": {
        "id": "glucose-treatment",
        "icon": "bloodtype",
        "title": "Glucose Management",
        "therapies": [
            {"name": "Metformin", "desc": "First-line for elevated glucose (HbA1c ≥6.5%)"},
            {"name": "GLP-1 RA", "desc": "Semaglutide/Tirzepatide for glycemic control + weight loss"},
            {"name": "SGLT2i", "desc": "Empagliflozin reduces glucose via urinary excretion"},
        ],
    },
    "sbp": {
        "id": "bp-treatment",
        "icon": "favorite",
        "title": "Blood Pressure Control",
        "therapies": [
            {"name": "ACE-I/ARB", "desc": "First-line for diabetes + hypertension"},
            {"name": "DASH Diet", "desc": "Dietary Approaches to Stop Hypertension"},
            {"name": "Sodium Reduction", "desc": "Target <2300mg/day sodium intake"},
        ],
    },
    "cholHDL": {
        "id": "hdl-treatment",
        "icon": "water_drop",
        "title": "HDL Cholesterol Improvement",
        "therapies": [
            {"name": "Aerobic Exercise", "desc": "150 min/week increases HDL 5-10%"},
            {"name": "Smoking Cessation", "desc": "Raises HDL by 5-10% within weeks"},
            {"name": "Omega-3 Fatty Acids", "desc": "EPA/DHA supplementation modestly raises HDL"},
        ],
    },
    "cholTri": {
        "id": "tri-treatment",
        "icon": "science",
        "title": "Triglyceride Reduction",
        "therapies": [
            {"name": "Icosapent Ethyl", "desc": "REDUCE-IT: 25% CV risk reduction"},
            {"name": "Weight Loss", "desc": "5-10% loss reduces TG by 20%"},
            {"name": "Limit Refined Carbs", "desc": "Reduce sugar/alcohol to lower TG"},
        ],
    },
    "waist": {
        "id": "waist-treatment",
        "icon": "straighten",
        "title": "Central Obesity Management",
        "therapies": [
            {"name": "Tirzepatide", "desc": "20% weight loss in SURMOUNT trials"},
            {"name": "Caloric Deficit", "desc": "500-750 kcal/day deficit for weight loss"},
            {"name": "Bariatric Surgery", "desc": "Consider if BMI >35 with comorbidities"},
        ],
    },
}

ALL_NORMAL_NOTICE = (
    "All modifiable risk factors are within normal range. "
    "Continue maintaining a healthy lifestyle."
)

"""
Medical knowledge base seed data.

Used when no dataset file is configured, and by the retrieval eval.
In production the collection comes from the JSON dataset instead.
"""

from __future__ import annotations

from medibot.schemas import Document


def get_medical_documents() -> list[Document]:
    """Get the built-in condition collection."""
    return [
        Document(
            name="Influenza",
            symptoms=["High fever", "Dry cough", "Muscle aches", "Fatigue", "Chills"],
            causes=["Influenza A or B virus", "Airborne droplets from infected people"],
            diagnosis="Clinical exam during flu season; rapid influenza swab test",
            treatment=["Rest", "Fluids", "Antiviral drugs such as oseltamivir"],
        ),
        Document(
            name="Common Cold",
            symptoms=["Runny nose", "Sneezing", "Sore throat", "Mild cough"],
            causes=["Rhinovirus", "Hand contact with contaminated surfaces"],
            diagnosis="Based on symptoms; no laboratory test usually needed",
            treatment=["Rest", "Fluids", "Saline nasal spray", "Throat lozenges"],
        ),
        Document(
            name="Type 2 Diabetes",
            symptoms=["Increased thirst", "Frequent urination", "Blurred vision", "Slow healing sores"],
            causes=["Insulin resistance", "Obesity", "Physical inactivity", "Family history"],
            diagnosis="Fasting blood glucose and HbA1c blood tests",
            treatment=["Metformin", "Insulin therapy", "Diet changes", "Regular exercise"],
        ),
        Document(
            name="Hypertension",
            symptoms=["Often no symptoms", "Headache", "Nosebleeds", "Shortness of breath"],
            causes=["High salt intake", "Obesity", "Stress", "Kidney disease"],
            diagnosis="Repeated blood pressure readings above 130/80 mmHg",
            treatment=["ACE inhibitors", "Diuretics", "Low sodium diet", "Regular exercise"],
        ),
        Document(
            name="Asthma",
            symptoms=["Wheezing", "Shortness of breath", "Chest tightness", "Night cough"],
            causes=["Airway inflammation", "Allergens such as pollen or dust mites", "Cold air"],
            diagnosis="Spirometry lung function test with bronchodilator response",
            treatment=["Inhaled corticosteroids", "Rescue inhaler with albuterol", "Avoid triggers"],
        ),
        Document(
            name="Migraine",
            symptoms=["Throbbing headache", "Nausea", "Sensitivity to light", "Visual aura"],
            causes=["Hormonal changes", "Lack of sleep", "Certain foods", "Stress"],
            diagnosis="Neurological exam and headache history",
            treatment=["Triptans", "Ibuprofen", "Rest in a dark quiet room"],
        ),
        Document(
            name="Pneumonia",
            symptoms=["Productive cough", "Fever", "Chest pain when breathing", "Shortness of breath"],
            causes=["Bacterial infection", "Viral infection", "Aspiration"],
            diagnosis="Chest X-ray and blood tests",
            treatment=["Antibiotics", "Oxygen therapy", "Rest", "Fluids"],
        ),
        Document(
            name="Gastroenteritis",
            symptoms=["Diarrhea", "Vomiting", "Stomach cramps", "Nausea"],
            causes=["Norovirus", "Contaminated food or water"],
            diagnosis="Based on symptoms; stool test if severe",
            treatment=["Oral rehydration", "Fluids", "Bland diet"],
        ),
    ]

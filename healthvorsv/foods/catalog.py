# -*- coding: utf-8 -*-
"""Foods — built-in reference catalog (approximate values for common Indian dishes)."""

from __future__ import annotations

from typing import List, NamedTuple, Optional


class CatalogFood(NamedTuple):
    name: str
    category: str
    calories_per_100g: float
    protein_g: float
    carbs_g: float
    fats_g: float
    serving_type: str  # gram | piece
    typical_weight_g: Optional[int] = None

    @property
    def unit(self) -> str:
        if self.serving_type == "piece" and self.typical_weight_g:
            return f"1 piece ({self.typical_weight_g}g)"
        return "100g"


CATALOG: List[CatalogFood] = [
    CatalogFood("Roti / Chapati", "Breads", 297, 11, 56, 4, "piece", 35),
    CatalogFood("Naan (Plain)", "Breads", 315, 9, 50, 9, "piece", 90),
    CatalogFood("Butter Naan", "Breads", 360, 10, 52, 13, "piece", 95),
    CatalogFood("Garlic Naan", "Breads", 380, 10, 55, 14, "piece", 100),
    CatalogFood("Tandoori Roti", "Breads", 300, 12, 58, 2, "piece", 40),
    CatalogFood("Rumali Roti", "Breads", 280, 9, 60, 1, "piece", 50),
    CatalogFood("Paratha (Plain)", "Breads", 330, 7, 45, 14, "piece", 60),
    CatalogFood("Aloo Paratha", "Breads", 250, 6, 36, 9, "piece", 120),
    CatalogFood("Gobi Paratha", "Breads", 220, 7, 32, 8, "piece", 120),
    CatalogFood("Mooli Paratha", "Breads", 200, 6, 28, 7, "piece", 120),
    CatalogFood("Lachha Paratha", "Breads", 350, 7, 42, 18, "piece", 70),
    CatalogFood("Puri", "Breads", 350, 6, 40, 19, "piece", 25),
    CatalogFood("Bhatura", "Breads", 340, 8, 50, 12, "piece", 80),
    CatalogFood("Thepla", "Breads", 320, 9, 40, 14, "piece", 45),
    CatalogFood("Makki di Roti", "Breads", 350, 8, 65, 7, "piece", 70),
    CatalogFood("Missi Roti", "Breads", 310, 13, 50, 6, "piece", 60),
    CatalogFood("Plain Rice (Cooked)", "Rice", 130, 2.7, 28, 0.3, "gram", None),
    CatalogFood("Brown Rice (Cooked)", "Rice", 111, 2.6, 23, 0.9, "gram", None),
    CatalogFood("Jeera Rice", "Rice", 160, 3, 30, 3, "gram", None),
    CatalogFood("Ghee Rice", "Rice", 190, 3, 28, 8, "gram", None),
    CatalogFood("Vegetable Pulao", "Rice", 150, 4, 26, 3, "gram", None),
    CatalogFood("Vegetable Biryani", "Rice", 180, 5, 25, 7, "gram", None),
    CatalogFood("Hyderabadi Veg Biryani", "Rice", 200, 6, 28, 8, "gram", None),
    CatalogFood("Chicken Biryani", "Rice", 220, 15, 22, 8, "gram", None),
    CatalogFood("Mutton Biryani", "Rice", 250, 16, 24, 10, "gram", None),
    CatalogFood("Egg Biryani", "Rice", 195, 10, 23, 7, "gram", None),
    CatalogFood("Lemon Rice", "Rice", 170, 3, 32, 4, "gram", None),
    CatalogFood("Curd Rice", "Rice", 140, 4, 22, 4, "gram", None),
    CatalogFood("Tamarind Rice (Pulihora)", "Rice", 190, 3, 35, 5, "gram", None),
    CatalogFood("Bisi Bele Bath", "Rice", 165, 6, 25, 4, "gram", None),
    CatalogFood("Coconut Rice", "Rice", 200, 3, 30, 8, "gram", None),
    CatalogFood("Khichdi", "Rice", 120, 5, 20, 2, "gram", None),
    CatalogFood("Dal Tadka (Toor Dal)", "Lentils", 115, 7, 18, 2, "gram", None),
    CatalogFood("Dal Fry", "Lentils", 130, 8, 19, 3, "gram", None),
    CatalogFood("Dal Makhani", "Lentils", 160, 9, 17, 6, "gram", None),
    CatalogFood("Chana Masala (Chickpeas)", "Lentils", 140, 8, 20, 3, "gram", None),
    CatalogFood("Rajma Masala (Kidney Beans)", "Lentils", 135, 8, 22, 2, "gram", None),
    CatalogFood("Sambar", "Lentils", 90, 4, 15, 1.5, "gram", None),
    CatalogFood("Moong Dal", "Lentils", 105, 7, 18, 0.5, "gram", None),
    CatalogFood("Masoor Dal", "Lentils", 110, 9, 19, 0.4, "gram", None),
    CatalogFood("Lobia Masala (Black Eyed Peas)", "Lentils", 128, 8, 21, 1, "gram", None),
    CatalogFood("Paneer Butter Masala", "Vegetarian", 180, 10, 8, 12, "gram", None),
    CatalogFood("Palak Paneer", "Vegetarian", 150, 12, 6, 9, "gram", None),
    CatalogFood("Shahi Paneer", "Vegetarian", 200, 11, 9, 14, "gram", None),
    CatalogFood("Kadai Paneer", "Vegetarian", 170, 12, 7, 11, "gram", None),
    CatalogFood("Mutter Paneer", "Vegetarian", 160, 10, 10, 9, "gram", None),
    CatalogFood("Paneer Bhurji", "Vegetarian", 250, 18, 5, 18, "gram", None),
    CatalogFood("Malai Kofta", "Vegetarian", 220, 7, 12, 16, "gram", None),
    CatalogFood("Aloo Gobi", "Vegetarian", 98, 3, 12, 4, "gram", None),
    CatalogFood("Aloo Matar", "Vegetarian", 110, 4, 15, 4, "gram", None),
    CatalogFood("Dum Aloo", "Vegetarian", 140, 3, 18, 6, "gram", None),
    CatalogFood("Baingan Bharta", "Vegetarian", 80, 2, 10, 4, "gram", None),
    CatalogFood("Bhindi Masala (Okra)", "Vegetarian", 110, 2, 9, 7, "gram", None),
    CatalogFood("Mixed Vegetable Korma", "Vegetarian", 140, 4, 10, 9, "gram", None),
    CatalogFood("Veg Kolhapuri", "Vegetarian", 155, 5, 12, 9, "gram", None),
    CatalogFood("Sarson ka Saag", "Vegetarian", 130, 6, 10, 8, "gram", None),
    CatalogFood("Avial", "Vegetarian", 120, 3, 10, 7, "gram", None),
    CatalogFood("Butter Chicken (Murgh Makhani)", "Non-Vegetarian", 240, 18, 5, 16, "gram", None),
    CatalogFood("Chicken Tikka Masala", "Non-Vegetarian", 200, 20, 6, 11, "gram", None),
    CatalogFood("Chicken Curry (Home style)", "Non-Vegetarian", 190, 20, 4, 10, "gram", None),
    CatalogFood("Kadai Chicken", "Non-Vegetarian", 210, 22, 3, 12, "gram", None),
    CatalogFood("Chicken Chettinad", "Non-Vegetarian", 230, 24, 5, 13, "gram", None),
    CatalogFood("Chilli Chicken (Gravy)", "Non-Vegetarian", 180, 16, 10, 8, "gram", None),
    CatalogFood("Mutton Rogan Josh", "Non-Vegetarian", 230, 18, 4, 16, "gram", None),
    CatalogFood("Mutton Korma", "Non-Vegetarian", 260, 20, 5, 18, "gram", None),
    CatalogFood("Keema Matar", "Non-Vegetarian", 200, 15, 8, 12, "gram", None),
    CatalogFood("Goan Fish Curry", "Non-Vegetarian", 180, 18, 3, 11, "gram", None),
    CatalogFood("Prawn Masala", "Non-Vegetarian", 170, 20, 5, 8, "gram", None),
    CatalogFood("Egg Curry", "Non-Vegetarian", 160, 12, 5, 10, "gram", None),
    CatalogFood("Egg Bhurji", "Non-Vegetarian", 200, 14, 3, 15, "gram", None),
    CatalogFood("Tandoori Chicken", "Non-Vegetarian", 220, 28, 2, 11, "gram", None),
    CatalogFood("Chicken 65", "Non-Vegetarian", 280, 25, 10, 15, "gram", None),
    CatalogFood("Fish Fry", "Non-Vegetarian", 250, 22, 8, 14, "gram", None),
    CatalogFood("Chicken Kebab", "Non-Vegetarian", 180, 25, 3, 8, "gram", None),
    CatalogFood("Boiled Egg", "Non-Vegetarian", 155, 13, 1.1, 11, "piece", 50),
    CatalogFood("Omelette (2 eggs)", "Non-Vegetarian", 190, 14, 2, 14, "piece", 120),
    CatalogFood("Idli", "South Indian", 132, 4, 28, 0.5, "piece", 50),
    CatalogFood("Dosa (Plain)", "South Indian", 168, 4, 35, 1.5, "piece", 80),
    CatalogFood("Masala Dosa", "South Indian", 180, 4, 29, 5, "piece", 150),
    CatalogFood("Rava Dosa", "South Indian", 200, 5, 38, 3, "piece", 70),
    CatalogFood("Pesarattu", "South Indian", 150, 9, 25, 2, "piece", 90),
    CatalogFood("Uttapam (Onion)", "South Indian", 150, 5, 25, 3, "piece", 120),
    CatalogFood("Vada (Medu Vada)", "Snacks", 334, 10, 40, 15, "piece", 70),
    CatalogFood("Pongal (Ven Pongal)", "South Indian", 140, 5, 20, 4, "gram", None),
    CatalogFood("Appam", "South Indian", 120, 3, 25, 1, "piece", 60),
    CatalogFood("Puttu", "South Indian", 145, 3, 32, 1, "gram", None),
    CatalogFood("Idiyappam", "South Indian", 110, 2, 25, 0.2, "gram", None),
    CatalogFood("Samosa (Vegetable)", "Snacks", 262, 5, 30, 14, "piece", 60),
    CatalogFood("Onion Pakora / Bhaji", "Snacks", 350, 6, 35, 20, "gram", None),
    CatalogFood("Paneer Pakora", "Snacks", 300, 12, 20, 19, "gram", None),
    CatalogFood("Dhokla", "Snacks", 160, 8, 25, 3, "gram", None),
    CatalogFood("Khandvi", "Snacks", 190, 7, 22, 8, "gram", None),
    CatalogFood("Kachori", "Snacks", 320, 6, 40, 15, "piece", 50),
    CatalogFood("Bhel Puri", "Snacks", 180, 4, 35, 3, "gram", None),
    CatalogFood("Sev Puri", "Snacks", 220, 5, 30, 9, "gram", None),
    CatalogFood("Pani Puri / Golgappa", "Snacks", 270, 6, 50, 5, "piece", 15),
    CatalogFood("Aloo Tikki", "Snacks", 190, 4, 30, 6, "piece", 70),
    CatalogFood("Vada Pav", "Snacks", 290, 7, 45, 9, "piece", 130),
    CatalogFood("Dabeli", "Snacks", 250, 5, 40, 8, "piece", 120),
    CatalogFood("Gulab Jamun", "Dessert", 380, 4, 55, 16, "piece", 40),
    CatalogFood("Rasgulla", "Dessert", 186, 6, 40, 0.2, "piece", 30),
    CatalogFood("Jalebi", "Dessert", 450, 3, 70, 18, "gram", None),
    CatalogFood("Kheer (Rice Payasam)", "Dessert", 130, 4, 22, 3, "gram", None),
    CatalogFood("Gajar ka Halwa (Carrot)", "Dessert", 190, 3, 25, 9, "gram", None),
    CatalogFood("Sooji Halwa", "Dessert", 250, 4, 40, 8, "gram", None),
    CatalogFood("Rasmalai", "Dessert", 250, 9, 30, 10, "piece", 50),
    CatalogFood("Ladoo (Besan)", "Dessert", 430, 8, 55, 20, "piece", 30),
    CatalogFood("Barfi (Kaju Katli)", "Dessert", 500, 10, 50, 28, "piece", 15),
    CatalogFood("Mysore Pak", "Dessert", 450, 4, 60, 22, "piece", 40),
    CatalogFood("Shrikhand", "Dessert", 180, 5, 25, 7, "gram", None),
    CatalogFood("Phirni", "Dessert", 140, 3, 25, 3, "gram", None),
    CatalogFood("Kulfi", "Dessert", 200, 6, 25, 9, "gram", None),
    CatalogFood("Mixed Vegetable Salad", "Sides", 45, 2, 8, 0.5, "gram", None),
    CatalogFood("Raita (Cucumber)", "Sides", 60, 3, 5, 3, "gram", None),
    CatalogFood("Mint Chutney", "Sides", 30, 1, 6, 0.2, "gram", None),
    CatalogFood("Tamarind Chutney", "Sides", 100, 0.5, 25, 0.1, "gram", None),
    CatalogFood("Mixed Pickle", "Sides", 150, 1, 5, 14, "gram", None),
    CatalogFood("Papad (Roasted)", "Sides", 380, 22, 60, 1, "piece", 12),
    CatalogFood("Papad (Fried)", "Sides", 500, 22, 58, 22, "piece", 15),
    CatalogFood("Lassi (Sweet)", "Beverages", 110, 4, 15, 4, "gram", None),
    CatalogFood("Mango Lassi", "Beverages", 130, 4, 20, 4, "gram", None),
    CatalogFood("Masala Chai", "Beverages", 40, 1, 6, 1.5, "gram", None),
    CatalogFood("Filter Coffee", "Beverages", 50, 1, 8, 1.5, "gram", None),
    CatalogFood("Jaljeera", "Beverages", 20, 0.5, 5, 0, "gram", None),
]

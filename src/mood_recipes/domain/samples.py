"""Sample recipes seeded into every new session."""

from mood_recipes.domain.recipes import Mood, Recipe


def sample_recipes() -> list[Recipe]:
    """Return a fresh copy of the sample set, two recipes per mood."""
    return [
        Recipe(
            name="Colorful Buddha Bowl",
            ingredients=(
                "Quinoa",
                "Avocado",
                "Cherry tomatoes",
                "Cucumber",
                "Chickpeas",
                "Kale",
                "Tahini dressing",
            ),
            instructions=(
                "Cook quinoa according to package instructions",
                "Chop vegetables into bite-sized pieces",
                "Arrange all ingredients in a bowl",
                "Drizzle with tahini dressing",
            ),
            mood=Mood.HAPPY,
            prep_time="15 mins",
            cook_time="20 mins",
            servings=2,
            image_ref="buddha_bowl",
        ),
        Recipe(
            name="Fresh Fruit Smoothie",
            ingredients=(
                "Mango",
                "Strawberries",
                "Banana",
                "Greek yogurt",
                "Honey",
                "Ice",
            ),
            instructions=(
                "Blend all fruits with yogurt",
                "Add honey to taste",
                "Blend with ice until smooth",
            ),
            mood=Mood.HAPPY,
            prep_time="5 mins",
            cook_time="0 mins",
            servings=2,
            image_ref="fruit_smoothie",
        ),
        Recipe(
            name="Comforting Mac and Cheese",
            ingredients=(
                "Macaroni",
                "Cheddar cheese",
                "Milk",
                "Butter",
                "Flour",
                "Salt",
                "Pepper",
            ),
            instructions=(
                "Cook macaroni according to package instructions",
                "Melt butter in a pan, add flour to make roux",
                "Gradually add milk while stirring",
                "Add cheese and stir until melted",
                "Combine with cooked pasta",
            ),
            mood=Mood.SAD,
            prep_time="10 mins",
            cook_time="20 mins",
            servings=4,
            image_ref="mac_and_cheese",
        ),
        Recipe(
            name="Chocolate Chip Cookies",
            ingredients=(
                "Flour",
                "Butter",
                "Brown sugar",
                "Eggs",
                "Vanilla extract",
                "Chocolate chips",
                "Baking soda",
                "Salt",
            ),
            instructions=(
                "Cream butter and sugar",
                "Add eggs and vanilla",
                "Mix in dry ingredients",
                "Fold in chocolate chips",
                "Bake at 350°F for 12 minutes",
            ),
            mood=Mood.SAD,
            prep_time="15 mins",
            cook_time="12 mins",
            servings=24,
            image_ref="chocolate_cookies",
        ),
        Recipe(
            name="Spicy Thai Curry",
            ingredients=(
                "Coconut milk",
                "Thai curry paste",
                "Vegetables",
                "Rice",
                "Lime",
                "Cilantro",
            ),
            instructions=(
                "Cook rice according to package instructions",
                "Sauté curry paste in oil",
                "Add coconut milk and vegetables",
                "Simmer until vegetables are tender",
                "Serve with rice and garnish with lime and cilantro",
            ),
            mood=Mood.ENERGETIC,
            prep_time="15 mins",
            cook_time="25 mins",
            servings=4,
            image_ref="thai_curry",
        ),
        Recipe(
            name="Protein Power Bowl",
            ingredients=(
                "Quinoa",
                "Grilled chicken",
                "Black beans",
                "Corn",
                "Bell peppers",
                "Avocado",
                "Lime dressing",
            ),
            instructions=(
                "Cook quinoa",
                "Grill chicken and slice",
                "Assemble bowl with all ingredients",
                "Drizzle with lime dressing",
            ),
            mood=Mood.ENERGETIC,
            prep_time="20 mins",
            cook_time="25 mins",
            servings=2,
            image_ref="protein_bowl",
        ),
        Recipe(
            name="Energizing Smoothie Bowl",
            ingredients=(
                "Banana",
                "Spinach",
                "Greek yogurt",
                "Honey",
                "Granola",
                "Chia seeds",
            ),
            instructions=(
                "Blend banana, spinach, and yogurt",
                "Pour into a bowl",
                "Top with granola and chia seeds",
                "Drizzle with honey",
            ),
            mood=Mood.TIRED,
            prep_time="5 mins",
            cook_time="0 mins",
            servings=1,
            image_ref="smoothie_bowl",
        ),
        Recipe(
            name="Green Tea Energy Bites",
            ingredients=("Dates", "Nuts", "Matcha powder", "Oats", "Honey", "Coconut"),
            instructions=(
                "Blend dates and nuts",
                "Mix in matcha and oats",
                "Form into balls",
                "Roll in coconut",
            ),
            mood=Mood.TIRED,
            prep_time="15 mins",
            cook_time="0 mins",
            servings=12,
            image_ref="energy_bites",
        ),
        Recipe(
            name="Calming Chamomile Cookies",
            ingredients=(
                "Flour",
                "Butter",
                "Honey",
                "Chamomile tea",
                "Lavender",
                "Vanilla extract",
            ),
            instructions=(
                "Infuse butter with chamomile",
                "Mix ingredients",
                "Form cookies",
                "Bake at 350°F for 10 minutes",
            ),
            mood=Mood.STRESSED,
            prep_time="20 mins",
            cook_time="10 mins",
            servings=24,
            image_ref="chamomile_cookies",
        ),
        Recipe(
            name="Anti-Stress Green Bowl",
            ingredients=(
                "Kale",
                "Quinoa",
                "Almonds",
                "Avocado",
                "Blueberries",
                "Lemon dressing",
            ),
            instructions=(
                "Cook quinoa",
                "Massage kale with olive oil",
                "Assemble bowl with all ingredients",
                "Drizzle with lemon dressing",
            ),
            mood=Mood.STRESSED,
            prep_time="15 mins",
            cook_time="20 mins",
            servings=2,
            image_ref="green_bowl",
        ),
    ]

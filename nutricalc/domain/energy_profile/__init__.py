"""Energy profile domain: BMR, TDEE, goal calories and macro split."""

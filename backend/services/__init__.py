"""
Services for GridSnake that sit outside the game engine (rendering).
"""

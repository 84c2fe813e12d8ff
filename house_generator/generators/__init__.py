"""
Layout generators: BSP room layout and room furnishing plans.
"""

# materials/lighting.py
from core.color import Color
from core.utils import reflect
from core.vector import Tuple
from materials.light import PointLight
from materials.material import Material


def lighting(material: Material, shape, light: PointLight, point: Tuple,
             eyev: Tuple, normalv: Tuple, in_shadow: bool = False) -> Color:
    """
    Phong shading of a single point.

    Parameters:
        material: Surface parameters at the point
        shape: The shape being shaded, used to resolve patterns
        light: The point light illuminating the surface
        point: World-space position being shaded
        eyev: Unit vector from the point towards the eye
        normalv: Unit surface normal at the point
        in_shadow: When True only the ambient term contributes

    Returns:
        Color: ambient + diffuse + specular contribution
    """
    effective_color = material.color_at(shape, point) * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0:
        # Light is on the other side of the surface.
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        return ambient + diffuse

    factor = reflect_dot_eye ** material.shininess
    specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular

"""
Shaders Module
GLSL source for the vertex-coloured cube.
"""

CUBE_VERTEX_SHADER = """#version 330 core

in vec3 a_pos;
in vec3 a_color;

out vec3 v_color;

uniform mat4 projection;
uniform mat4 view;
uniform mat4 model;

void main() {
    gl_Position = projection * view * model * vec4(a_pos, 1.0);
    v_color = a_color;
}
"""

CUBE_FRAGMENT_SHADER = """#version 330 core

in vec3 v_color;

out vec4 FragColor;

void main() {
    FragColor = vec4(v_color, 1.0);
}
"""

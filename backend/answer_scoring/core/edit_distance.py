"""Levenshtein edit distance."""


def levenshtein(a: str, b: str) -> int:
    """Compute Levenshtein edit distance between two strings."""
    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)

    # Create matrix
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    # Initialize first row and column
    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    # Fill matrix
    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],      # insertion
                    matrix[i - 1][j],      # deletion
                )

    return matrix[len(b)][len(a)]

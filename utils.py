import os

TITLE_ART = r"""
 _____ ____  ____       _____  ____
|_   _/ ___||  _ \     |  __ \|  _ \
  | | \___ \| |_) |____| |  | | |_) |
  | |  ___) |  __/_____| |__| |  __/
  |_| |____/|_|        |_____/|_|
"""

MAX_CITIES = 64
NO_PATH = (1 << 64) - 1  # largest unsigned 64-bit value, marks a missing edge
MAX_CITY_NAME_LENGTH = 511

INPUT_FILE_DIRECTORY = "inputs"
OUTPUT_FILE_DIRECTORY = "outputs"
INPUT_FILE_EXTENSION = ".in"
OUTPUT_FILE_EXTENSION = ".out"


def list_all_files(directory, extension):
    """
    List all files under path
    """
    files = get_files_with_extension(directory, extension)
    for file in files:
        print(file)


def get_files_with_extension(directory, extension):
    """
    Get all files end with specified extension under directory
    """
    files = []
    for file in os.listdir(directory):
        if file.endswith(extension):
            files.append(file)
    return sorted(files)


def input_file_names_to_file_path(user_in_files_str, in_files_all, directory=INPUT_FILE_DIRECTORY):
    """
    Resolve names typed by the user (with or without extension) to paths
    under the input directory. Unknown names are collected in the message.
    """
    user_in_files = user_in_files_str.split()
    file_paths = []
    message = ''
    for file in user_in_files:
        if file in in_files_all:
            file_paths.append(os.path.join(directory, file))
        else:
            file_con = file + INPUT_FILE_EXTENSION
            if file_con in in_files_all:
                file_paths.append(os.path.join(directory, file_con))
            else:
                message += f'{file} '
    if message:
        message = 'Input ' + message + 'Not Exist'
    return file_paths, message


def read_file(file):
    """
    Read all lines in file
    Trailing newlines and surrounding whitespace are stripped
    """
    with open(file, 'r') as f:
        lines = f.readlines()
    return [line.strip() for line in lines]


def write_to_file(file, data, mode='w'):
    """
    Write data into file
    Default mode: 'w'
    """
    with open(file, mode) as f:
        f.write(data)


if __name__ == "__main__":
    print(TITLE_ART)
    list_all_files(INPUT_FILE_DIRECTORY, INPUT_FILE_EXTENSION)

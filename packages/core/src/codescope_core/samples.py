"""Small snippets with known problems, one per supported source language.

`codescope review --sample` sends the snippet for the selected language, which
is the quickest way to see what a review looks like.
"""

SAMPLES: dict[str, str] = {
    "typescript": """\
function findUser(users: any[], username: string) {
  for (var i = 0; i < users.length; i++) {
    if (users[i].name == username) {
      return users[i];
    }
  }
  return null;
}
""",
    "javascript": """\
function processData(data) {
  var result = [];
  for (var i = 0; i < data.length; i++) {
    if (data[i].type == 'user') {
      result.push(data[i].name);
    }
  }
  return result;
}

var params = new URLSearchParams(window.location.search);
document.getElementById('greeting').innerHTML = "Hello, " + params.get('name');
""",
    "python": """\
import os

def get_user_permissions(user_id):
    query = "SELECT permissions FROM users WHERE id = " + user_id
    os.system(f"psql -c '{query}'")

def create_report(items):
    report = ""
    for item in items:
        report += str(item) + "\\n"
    return report
""",
    "java": """\
public class UserManager {
    public String getUserInfo(String userId) {
        String query = "SELECT * FROM users WHERE userId = '" + userId + "'";
        try {
            java.sql.ResultSet rs = executeQuery(query);
            if (rs.next()) {
                return "User: " + rs.getString("name");
            }
        } catch (Exception e) {
        }
        return null;
    }

    private java.sql.ResultSet executeQuery(String q) { return null; }
}
""",
    "csharp": """\
public class DataProcessor
{
    public string BuildString(string[] parts)
    {
        string result = "";
        for (int i = 0; i < parts.Length; i++)
        {
            result += parts[i];
        }
        return result;
    }

    public void Connect(string connectionString)
    {
        var connection = new System.Data.SqlClient.SqlConnection(connectionString);
        connection.Open();
    }
}
""",
    "go": """\
package main

import (
	"fmt"
	"os"
)

func readFile(filename string) {
	f, _ := os.Open(filename)
	fmt.Println(f.Name())
}
""",
    "rust": """\
fn main() {
    let config: Option<String> = None;
    let setting = config.unwrap();
    println!("Setting is {}", setting);

    let v = vec![1, 2, 3];
    println!("The 10th element is {}", v[9]);
}
""",
    "html": """\
<!DOCTYPE html>
<html>
<head>
    <title>My Page</title>
</head>
<body>
    <center><b>Welcome!</b></center>
    <font color="red">This is important text.</font>
    <img src="photo.jpg">
    <p style="font-size: 20px; color: blue;">This is a paragraph.</p>
</body>
</html>
""",
    "css": """\
#main-header {
  font-size: 24px;
  color: #333;
}

div.container ul li a.active {
  font-weight: bold !important;
}

* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}
""",
    "sql": """\
SELECT * FROM products;

SELECT product_name, price FROM products WHERE category = 'search_term';

SELECT c.customer_name, o.order_date
FROM customers c, orders o;
""",
    "cpp": """\
#include <iostream>

void process_array(int size) {
    int arr[10];
    for (int i = 0; i < size; ++i) {
        arr[i] = i;
    }
}

int main() {
    int* p = new int;
    *p = 5;
    process_array(15);
    return 0;
}
""",
    "php": """\
<?php
$userId = $_GET['id'];
$query = "SELECT * FROM users WHERE id = " . $userId;
mysql_query($query);

$name = $_GET['name'];
echo "Welcome, " . $name;
?>
""",
}

SOURCE_LANGUAGES = tuple(SAMPLES)
